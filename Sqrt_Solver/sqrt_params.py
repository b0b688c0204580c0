from dataclasses import dataclass
from Shared.solver_report import SolverReportParams
import Sqrt_Solver.settings as settings

@dataclass
class SqrtParams:
    # Maximum refinement steps before the last estimate is returned as-is
    max_iterations: int = settings.max_iterations
    initial_guess: float = settings.initial_guess
    prior_guess: float = settings.prior_guess
    # None compares successive estimates for exact equality
    convergence_tolerance: float = None
    report: SolverReportParams = None
