"""Allow ``python -m cost_report``."""

from .cli import app

app(prog_name="cost-report")
