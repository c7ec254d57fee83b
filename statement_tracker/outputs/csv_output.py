# statement_tracker/outputs/csv_output.py

import os
import csv
import logging
from statement_tracker.outputs.base import BaseOutput, EmptyExportError
from statement_tracker.outputs.excel_output import ExcelOutput
from statement_tracker.utils import to_cents

logger = logging.getLogger(__name__)


class CSVOutput(BaseOutput):
    """
    Writes the transaction list to Financial_Statements.csv, in insertion
    order, with the same columns as the workbook's Transactions sheet.
    """
    def __init__(self, config):
        self.config      = config
        self.output_dir  = config.get('output_dir', 'data')

    def write(self, transactions, totals=None):
        if not transactions:
            raise EmptyExportError()

        os.makedirs(self.output_dir, exist_ok=True)
        out_path = os.path.join(self.output_dir, 'Financial_Statements.csv')

        with open(out_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(ExcelOutput.TRANSACTION_HEADERS)
            for tx in transactions:
                writer.writerow([
                    tx.date.isoformat(),
                    tx.description,
                    tx.category.label,
                    str(to_cents(tx.amount)),
                ])

        logger.info("Written %d transactions to %s", len(transactions), out_path)
        return out_path
