# statement_tracker/outputs/html_output.py

import os
import logging
from html import escape
from statement_tracker.core.aggregator import statements
from statement_tracker.outputs.base import BaseOutput, EmptyExportError
from statement_tracker.utils import format_peso

logger = logging.getLogger(__name__)


class HTMLOutput(BaseOutput):
    """Generate a static HTML report mirroring the workbook sheets."""

    def __init__(self, config):
        self.config = config
        self.output_dir = config.get('output_dir', 'data')

    def write(self, transactions, totals):
        if not transactions:
            raise EmptyExportError()

        def tx_row(tx):
            return (
                f"<tr><td>{tx.date.isoformat()}</td><td>{escape(tx.description)}</td>"
                f"<td>{tx.category.label}</td><td>{format_peso(tx.amount)}</td></tr>"
            )

        html_parts = [
            "<html><head><meta charset='UTF-8'>",
            "<style>body{font-family:sans-serif;}table{border-collapse:collapse;margin-bottom:20px;}th,td{border:1px solid #ccc;padding:4px 8px;}th{background:#eee;}</style>",
            "</head><body>",
            "<h1>Financial Statements</h1>",
            "<h2>Transactions</h2>",
            "<table><tr><th>Date</th><th>Description</th><th>Category</th><th>Amount</th></tr>",
        ]
        html_parts.extend(tx_row(tx) for tx in transactions)
        html_parts.append("</table>")

        for statement in statements(totals):
            html_parts.append(f"<h2>{statement.title}</h2>")
            html_parts.append("<table>")
            for label, amount in statement.rows:
                html_parts.append(f"<tr><th>{label}</th><td>{format_peso(amount)}</td></tr>")
            html_parts.append("</table>")

        html_parts.append("</body></html>")

        os.makedirs(self.output_dir, exist_ok=True)
        out_path = os.path.join(self.output_dir, 'Financial_Statements.html')
        with open(out_path, 'w', encoding='utf-8') as f:
            f.write("\n".join(html_parts))

        logger.info("Written %d transactions to %s", len(transactions), out_path)
        return out_path
