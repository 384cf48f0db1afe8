import random

STUDENT_PREFIX = "STU"
ADMIN_PREFIX = "ADM"

ID_MIN = 1000
ID_MAX = 9999


def generate_id(prefix: str) -> str:
    """
    Human-readable key such as "STU4821".

    Not checked against existing rows: a collision surfaces as a duplicate
    key from the store and is retried by the gateway.
    """
    return f"{prefix}{random.randint(ID_MIN, ID_MAX)}"
