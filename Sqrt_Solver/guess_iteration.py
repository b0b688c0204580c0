from dataclasses import dataclass

@dataclass
class GuessIteration:
    prior_guess: float = 0.0
    current_guess: float = 1.0
    iteration: int = 0
