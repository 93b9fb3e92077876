import time

import patternkit
from patternkit import ValidationError


def main() -> None:
    srv = patternkit.run(port=0)
    client = srv.client() if isinstance(srv, patternkit.PatternkitServer) else srv

    for isbn, title, sales in [
        ("AB123", "Harry Potter", 100),
        ("AB123", "Harry Potter", 50),
        ("CD345", "To Kill a Mockingbird", 10),
        ("CD345", "To Kill a Mockingbird", 20),
        ("EF567", "The Great Gatsby", 20),
    ]:
        client.add_book(title, "unknown", isbn, sales=sales)

    books = client.get_books()
    print(f"{books['copies']} copies, {books['uniqueBooks']} book instances")

    try:
        client.update_person(age="43")
    except ValidationError as ex:
        print(f"rejected {ex.field}: {ex}")
    print("age is still", client.get_person_field("age"))

    client.increment_counter()
    print("counter:", client.get_counter())

    print("revision:", client.events()["globalRevision"])

    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
