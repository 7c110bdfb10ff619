"""
Parses a small document, reads its members and writes it back out.

    $ python examples/demo.py
"""

import tinyjson

DOCUMENT = """
    {
        "姓名": "龚",
        "年龄": 22,
        "身份": "学生",
        "婚姻状况": false
    }
"""


def main() -> None:
    person = tinyjson.parse(DOCUMENT)

    name = person["姓名"].get_string()
    age = person["年龄"].get_integer()
    is_married = person["婚姻状况"].get_bool()

    print(f"姓名: {name}")
    print(f"年龄: {age}")
    print(f"婚姻状况: {'已婚' if is_married else '未婚'}")

    person.add_member("年龄", age + 1)
    print(tinyjson.to_string(person))


if __name__ == "__main__":
    main()
