"""
Basic options: lifting nullable lookups, chaining, and exhaustive dispatch.

Run: python examples/basic_option.py
"""
from optionpy import (
    ConsoleLogger,
    from_nullable,
    match,
    trace,
    unwrap_or,
)


USERS = {
    "ada": {"email": "ada@example.com", "age": 36},
    "bob": {"email": None, "age": 0},
}


def email_domain(name: str, logger: ConsoleLogger) -> str:
    user = trace(from_nullable(USERS.get(name)), logger, f"user[{name}]")
    email = trace(user.flat_map(lambda u: from_nullable(u["email"])), logger, "email")
    domain = email.map(lambda e: e.split("@", 1)[1])
    return match(domain, some=lambda d: f"{name} -> {d}", none=lambda: f"{name} -> (no email)")


def main():
    logger = ConsoleLogger(name="demo", level="DEBUG")

    for name in ("ada", "bob", "eve"):
        print(email_domain(name, logger))

    # falsy payloads are still present
    age = from_nullable(USERS["bob"]["age"])
    print("bob age =>", unwrap_or(age, "unknown"))   # 0


if __name__ == "__main__":
    main()
