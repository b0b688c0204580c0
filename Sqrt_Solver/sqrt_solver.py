import logging
import numpy as np
import Sqrt_Solver.settings as settings
from Shared.solver_report import SolverReport, SolverReportParams
from Sqrt_Solver.guess_iteration import GuessIteration
from Sqrt_Solver.sqrt_params import SqrtParams

class SqrtSolver:
    params: SqrtParams = None
    report: SolverReport = None

    converged: bool = False
    iterations: int = 0
    last_guess: GuessIteration = None

    def __init__(self, params: SqrtParams = None):
        if params is None:
            params = SqrtParams()
        self.params = params

        report_params = params.report
        if report_params is None:
            report_params = SolverReportParams(name="Sqrt Solver Steps")
        self.report = SolverReport(report_params)

    # Approximates the square root of target using Newton's method
    # Returns the last estimate, whether or not it converged within max_iterations
    def solve(self, target: float, restart: GuessIteration = None) -> float:
        if restart is None:
            guess = GuessIteration(
                prior_guess=self.params.prior_guess,
                current_guess=self.params.initial_guess
            )
        else:
            logging.info(f"Sqrt Solver: Restarting with provided guess: {restart}")
            guess = restart
            if guess.iteration < 0 or guess.iteration > self.params.max_iterations:
                raise ValueError(f"Restart iteration {guess.iteration} is outside 0 to {self.params.max_iterations}.")

        self.report.clear()
        self.converged = False

        x = np.float64(target)
        prior_z = np.float64(guess.prior_guess)
        z = np.float64(guess.current_guess)
        i = guess.iteration
        start = guess.iteration

        # Zero estimates divide by zero, negative targets go to NaN; both just carry through
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            while i < self.params.max_iterations:
                logging.debug(f"Sqrt Solver: Iteration {i}, Estimate: {z}")
                self.report.add_step(Iteration=i, Estimate=float(z), Square=float(z * z), Difference=float(z * z - x))

                if self.__has_converged(z, prior_z, stepped=i > start):
                    logging.info(f"Sqrt Solver: Estimate {z} converged after {i} iterations.")
                    return self.__finish(prior_z, z, i, converged=True)

                if z * z == x:
                    logging.info(f"Sqrt Solver: Exact square root {z} found after {i} iterations.")
                    return self.__finish(prior_z, z, i, converged=True)

                prior_z = z
                z = z - (z * z - x) / (2 * z)
                i += 1

            self.report.add_step(Iteration=i, Estimate=float(z), Square=float(z * z), Difference=float(z * z - x))

        logging.warning(f"Sqrt Solver: Maximum iterations reached without convergence. Final estimate: {z}, Last estimate: {prior_z}")
        return self.__finish(prior_z, z, i, converged=False)

    def print_results(self):
        print(f"Result: {self.last_guess.current_guess} after {self.iterations} iterations (converged: {self.converged})")

    def __has_converged(self, z, prior_z, stepped: bool) -> bool:
        if self.params.convergence_tolerance is None:
            return z == prior_z
        # The seed pair is not a pair of successive estimates
        if not stepped:
            return False
        return abs(z - prior_z) <= self.params.convergence_tolerance

    def __finish(self, prior_z, z, iteration: int, converged: bool) -> float:
        self.converged = converged
        self.iterations = iteration
        self.last_guess = GuessIteration(
            prior_guess=float(prior_z),
            current_guess=float(z),
            iteration=iteration
        )
        return float(z)


def approximate(target: float, max_iterations: int = settings.max_iterations) -> float:
    solver = SqrtSolver(SqrtParams(max_iterations=max_iterations))
    return solver.solve(target)
