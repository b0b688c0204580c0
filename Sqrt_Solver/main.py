import json
import logging
import os
import Sqrt_Solver.settings as settings
from Shared.logging_setup import setup_logging
from Shared.solver_report import SolverReportParams
from Sqrt_Solver.sqrt_params import SqrtParams
from Sqrt_Solver.sqrt_solver import SqrtSolver


def parse_reports_json() -> dict[str, SolverReportParams]:
    # Load reports.json from the local directory
    current_dir = os.path.dirname(__file__)
    reports_file_path = os.path.join(current_dir, 'reports.json')

    with open(reports_file_path, 'r') as file:
        reports_json = json.load(file)

    # Convert each value in reports_data to a SolverReportParams object
    reports_data = {key: SolverReportParams.from_dict(value) for key, value in reports_json.items()}

    return reports_data

def run() -> float:
    reports = parse_reports_json()

    params = SqrtParams(report=reports.get("Solver Steps"))
    solver = SqrtSolver(params)
    result = solver.solve(settings.target)

    solver.report.log_steps()
    solver.report.save_excel()
    logging.info(f"Sqrt Solver: Square root of {settings.target} is approximately {result}")

    solver.print_results()
    return result


if __name__ == '__main__':
    setup_logging(settings.logging_level)
    run()
