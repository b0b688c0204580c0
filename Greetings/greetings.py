import random

# Greeting phrases, each formatted with the name being greeted
formats = [
    "Hi, {}. Welcome!",
    "Great to see you, {}!",
    "Hail, {}! Well met!",
]


def hello(name: str, rng: random.Random = None) -> str:
    """Returns a greeting for the named person. Raises ValueError if no name was given."""
    if name == "":
        raise ValueError("empty name")

    return random_format(rng).format(name)


def hellos(names: list[str], rng: random.Random = None) -> dict[str, str]:
    """Returns a map that associates each of the named people with a greeting message."""
    if rng is None:
        rng = random.Random()

    messages = {}
    for name in names:
        messages[name] = hello(name, rng)
    return messages


def random_format(rng: random.Random = None) -> str:
    if rng is None:
        rng = random.Random()
    return rng.choice(formats)
