import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "timesheet-engine-secret"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Schedule pre-filled on weekdays of a new timesheet week
    DEFAULT_TIME_IN = os.environ.get("DEFAULT_TIME_IN", "08:00")
    DEFAULT_TIME_OUT = os.environ.get("DEFAULT_TIME_OUT", "16:30")
    DEFAULT_MEAL_BREAK_START = os.environ.get("DEFAULT_MEAL_BREAK_START", "12:00")
    DEFAULT_MEAL_BREAK_END = os.environ.get("DEFAULT_MEAL_BREAK_END", "12:30")
    DEFAULT_AM_BREAK_START = os.environ.get("DEFAULT_AM_BREAK_START", "10:00")
    DEFAULT_AM_BREAK_END = os.environ.get("DEFAULT_AM_BREAK_END", "10:10")
    DEFAULT_PM_BREAK_START = os.environ.get("DEFAULT_PM_BREAK_START", "15:00")
    DEFAULT_PM_BREAK_END = os.environ.get("DEFAULT_PM_BREAK_END", "15:10")


# Module-level names read by create_app()
SECRET_KEY = Config.SECRET_KEY
LOG_LEVEL = Config.LOG_LEVEL
DEFAULT_TIME_IN = Config.DEFAULT_TIME_IN
DEFAULT_TIME_OUT = Config.DEFAULT_TIME_OUT
DEFAULT_MEAL_BREAK_START = Config.DEFAULT_MEAL_BREAK_START
DEFAULT_MEAL_BREAK_END = Config.DEFAULT_MEAL_BREAK_END
DEFAULT_AM_BREAK_START = Config.DEFAULT_AM_BREAK_START
DEFAULT_AM_BREAK_END = Config.DEFAULT_AM_BREAK_END
DEFAULT_PM_BREAK_START = Config.DEFAULT_PM_BREAK_START
DEFAULT_PM_BREAK_END = Config.DEFAULT_PM_BREAK_END

DEBUG = bool(int(os.environ.get("DEBUG", "1")))
