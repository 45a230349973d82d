"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the hour rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from timesheet_engine.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    service = container.timesheet_service

    timesheet = service.new_week(user_id=1, week_start=date.today())
    timesheet.days["tuesday"].time_out = "21:00"
    timesheet.days["saturday"].did_not_work = False
    timesheet.days["saturday"].time_in = "09:00"
    timesheet.days["saturday"].time_out = "13:00"

    totals = service.recalculate(timesheet)
    print(totals.to_dict())
    print(service.validate_week(timesheet))


if __name__ == "__main__":
    main()
