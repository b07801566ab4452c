"""
Basic usage examples for brace_template.
"""
from brace_template import Template, template


class Server:
    def product_tokens(self):
        return "demo-server/1.0"

    def url(self):
        return "http://localhost:8080/"


def example_basic_usage():
    print("--- Basic Usage ---")
    context = {
        "user": {
            "name": "Alice",
            "roles": ["admin", "editor"]
        },
        "env": "production"
    }

    tpl = Template("Hello {user.name}, welcome to {env}. First role: {user.roles.0}")
    print(f"Template: {tpl.template}")
    print(f"Result:   {tpl % context}")


def example_nested_keys():
    print("\n--- Nested Keys ---")
    context = {"labels": {"en": "Hello", "fr": "Bonjour"}, "lang": "fr"}

    tpl = template("{labels.{lang}}")
    print(f"Template: {tpl.template}")
    print(f"Result:   {tpl.format(context)}")


def example_objects():
    print("\n--- Objects ---")
    tpl = Template("{product_tokens} listening at {url}", Server())
    print(f"Result:   {tpl}")


def example_escaping():
    print("\n--- Escaping ---")
    tpl = Template("\\{not a placeholder\\} but {this} is")
    print(f"Result:   {tpl.format({'this': 'that'})}")


if __name__ == "__main__":
    example_basic_usage()
    example_nested_keys()
    example_objects()
    example_escaping()
