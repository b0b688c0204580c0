import logging

target = 2000.0                 # The value whose square root the runner solves for

max_iterations = 10             # The maximum number of Newton steps. If exceeded, the last estimate is returned
initial_guess = 1.0             # Starting estimate
prior_guess = 0.0               # Starting "previous" estimate, must differ from initial_guess

logging_level = logging.INFO    # Use logging.DEBUG to see every estimate
