import logging
import random
from Greetings.greetings import hello, hellos
from Shared.logging_setup import setup_logging

name = "Gladys"
names = ["Gladys", "Samantha", "Darrin"]


def run(rng: random.Random = None):
    if rng is None:
        rng = random.Random()

    try:
        message = hello(name, rng)
        print(message)

        messages = hellos(names, rng)
        for greeted, greeting in messages.items():
            print(f"{greeted}: {greeting}")
    except ValueError as e:
        logging.error(f"Greetings: {e}")
        raise

    return messages


if __name__ == "__main__":
    setup_logging()
    run()
