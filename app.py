"""Development entry point: ``python app.py`` then POST logs to /api/ledger/analyze."""

import os

from src.timesheet_ledger.timesheet_ledger.main import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config["DEBUG"], port=int(os.getenv("PORT", "5000")))
