"""
Example 01: Basic Transform

This example demonstrates the four kinds of schema actions and nested
target properties on plain dicts.
"""

from morphkit import morph


API_USERS = [
    {
        "firstName": "John",
        "lastName": "Smith",
        "age": 25,
        "address": {"streetAddress": "21 2nd Street", "city": "New York", "state": "NY"},
        "phoneNumber": [
            {"type": "home", "number": "212 555-1234"},
            {"type": "fax", "number": "646 555-4567"},
        ],
    },
    {
        "firstName": "Jane",
        "lastName": "Doe",
        "age": 31,
        "address": {"streetAddress": "1 Main Street", "city": "Boston", "state": "MA"},
        "phoneNumber": [],
    },
]


def main():
    schema = {
        # Action<String>: copy a source path
        "city": "address.city",
        "phone": "phoneNumber[0].number",
        # Action<Function>: free computing over the item and the collection
        "name": lambda user: f"{user['firstName']} {user['lastName']}",
        "older_than_average": lambda user, users: user["age"] > sum(u["age"] for u in users) / len(users),
        # Action<Aggregator>: rebuild a sub-object from several paths
        "identity": ["firstName", "address.state"],
        # Action<Selector>: a path and a function
        "state": {"path": "address.state", "fn": lambda state: state.lower()},
        # Nested schema
        "contact": {"street": "address.streetAddress"},
    }

    print("=== Basic Transform ===\n")

    mapper = morph(schema)
    for user in mapper(API_USERS):
        print(f"   {user}")
    print()

    print("Single item:")
    print(f"   {morph(schema, API_USERS[0])}")


if __name__ == "__main__":
    main()
