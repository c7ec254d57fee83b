# statement_tracker/outputs/excel_output.py

"""Excel output module backed by XlsxWriter.

The workbook always holds four worksheets in a fixed order: the raw
``Transactions`` list followed by the income statement, balance sheet and
cash flow statement. Statement figures are written as the same
peso-formatted strings shown in the web view, while transaction amounts
stay numeric so they can be summed in Excel.
"""

from __future__ import annotations

import io
import logging
import os

import xlsxwriter

from statement_tracker.core.aggregator import statements
from statement_tracker.outputs.base import BaseOutput, EmptyExportError
from statement_tracker.utils import CURRENCY_SYMBOL, format_peso

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "Financial_Statements.xlsx"


class ExcelOutput(BaseOutput):
    """Generate the Financial_Statements workbook."""

    TRANSACTIONS = "Transactions"
    AMOUNT_HEADER = f"Amount ({CURRENCY_SYMBOL})"
    TRANSACTION_HEADERS = ["Date", "Description", "Category", AMOUNT_HEADER]

    def __init__(self, config: dict):
        self.config = config
        self.output_dir = config.get("output_dir", "data")
        self.filename = config.get("export_filename") or DEFAULT_FILENAME

    def write(self, transactions, totals):
        if not transactions:
            raise EmptyExportError()

        os.makedirs(self.output_dir, exist_ok=True)
        out_path = os.path.join(self.output_dir, self.filename)
        workbook = xlsxwriter.Workbook(out_path)
        self._fill(workbook, transactions, totals)
        workbook.close()
        logger.info("Written Excel workbook %s", out_path)
        return out_path

    def render(self, transactions, totals) -> bytes:
        """Build the workbook in memory, for streaming as a download."""
        if not transactions:
            raise EmptyExportError()

        buffer = io.BytesIO()
        workbook = xlsxwriter.Workbook(buffer, {"in_memory": True})
        self._fill(workbook, transactions, totals)
        workbook.close()
        return buffer.getvalue()

    def _fill(self, workbook, transactions, totals):
        bold = workbook.add_format({"bold": True})
        amount_fmt = workbook.add_format({"num_format": "#,##0.00"})

        ws = workbook.add_worksheet(self.TRANSACTIONS)
        ws.freeze_panes(1, 0)
        ws.write_row(0, 0, self.TRANSACTION_HEADERS, bold)
        for row_idx, tx in enumerate(transactions, start=1):
            row = tx.as_row()
            ws.write_row(row_idx, 0, row[:3])
            ws.write_number(row_idx, 3, row[3], amount_fmt)
        ws.set_column(0, 0, 12)
        ws.set_column(1, 1, 40)
        ws.set_column(2, 2, 14)
        ws.set_column(3, 3, 14, amount_fmt)

        for statement in statements(totals):
            sheet = workbook.add_worksheet(statement.title)
            sheet.write_row(0, 0, [statement.title, self.AMOUNT_HEADER], bold)
            for row_idx, (label, amount) in enumerate(statement.rows, start=1):
                sheet.write_string(row_idx, 0, label)
                sheet.write_string(row_idx, 1, format_peso(amount))
            sheet.set_column(0, 0, 22)
            sheet.set_column(1, 1, 16)
