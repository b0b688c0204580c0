from dataclasses import dataclass
import logging
import os
import openpyxl
from openpyxl.utils.dataframe import dataframe_to_rows
import pandas as pd
from typing import Any

@dataclass
class SolverReportParams:
    name: str
    sheet_name: str = "Steps"
    working_directory: str = "Reports"

    @staticmethod
    def from_dict(obj: Any) -> 'SolverReportParams':
        _name = str(obj.get("name"))
        _sheet_name = str(obj.get("sheet", "Steps"))
        _working_directory = str(obj.get("working_directory", "Reports"))
        return SolverReportParams(_name, _sheet_name, _working_directory)

class SolverReport:
    __steps: list[dict] = None

    def __init__(self, params: SolverReportParams, filepath: str = None):
        self.name = params.name
        self.sheet_name = params.sheet_name
        self.working_directory = params.working_directory

        if filepath is not None:
            self.working_directory = filepath

        self.__steps = []

    def add_step(self, **values):
        self.__steps.append(values)

    def clear(self):
        self.__steps = []

    def get_data(self) -> pd.DataFrame:
        if not self.__steps:
            raise ValueError("No solver steps have been recorded yet. Run the solver first.")
        return pd.DataFrame(self.__steps)

    def get_filename(self, extension: str) -> str:
        return os.path.join(self.working_directory, f"{self.name}.{extension}")

    def log_steps(self):
        for step in self.__steps:
            logging.info(", ".join(f"{key}: {value}" for key, value in step.items()))

    def save_csv(self) -> str:
        data = self.get_data()
        os.makedirs(self.working_directory, exist_ok=True)

        filename = self.get_filename("csv")
        data.to_csv(filename, index=False)
        logging.info(f"Saved report '{filename}' with {len(data)} rows.")
        return filename

    def save_excel(self) -> str:
        data = self.get_data()
        os.makedirs(self.working_directory, exist_ok=True)

        filename = self.get_filename("xlsx")
        workbook = openpyxl.Workbook()
        sheet = workbook.active
        sheet.title = self.sheet_name
        for row in dataframe_to_rows(data, index=False, header=True):
            sheet.append(row)

        workbook.save(filename)
        workbook.close()
        logging.info(f"Saved report '{filename}' with {len(data)} rows.")
        return filename
