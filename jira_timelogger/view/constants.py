# jira_timelogger/view/constants.py
"""Element names, state classes and placeholder texts used by the view."""

from jira_timelogger.models.activity_log import LogLevel

# Form and fields
LOGGER_FORM = "loggerForm"
ISSUE_FIELD = "issue"
ISSUE_ROW = "issueRow"
TIME_MANUAL_FIELD = "timeManual"
TIME_MANUAL_ROW = "timeManualRow"
TIME_AUTO = "timeAuto"
CLEAR_TIME_BUTTON = "clearTimeButton"

# Text regions
SUMMARY = "summary"
TIME_AUTO_VALUE = "timeAutoValue"
LOGGED_TOTAL = "loggedTotal"
DAY_GRAND_TOTAL = "dayGrandTotal"
VERSION = "version"
COPY_YEAR = "copyYear"
USER_LOG_CONTAINER = "userLogContainer"
MASK = "mask"

# State class applied to the row of an invalid field
DANGER = "danger"

# Summary placeholders. The "..." marks in-flight states and keeps them out
# of the submitted summary.
SUMMARY_WAITING = "*Waiting...*"
SUMMARY_CHECKING = "*Checking...*"
SUMMARY_INVALID = "*Invalid issue key*"
SUMMARY_BLANK_HTML = "&nbsp;"
IN_FLIGHT_MARKER = "..."

AL_COLOUR_MAP = {
    LogLevel.INFO: "#5bb75b",
    LogLevel.WARN: "#f6b83f",
    LogLevel.ERROR: "#b75b5b",
}
AL_FADE_TO = "none"

NEW_DAY_CONFIRMATION = (
    "It looks like this is a new day,\n"
    "do you want to reset the logged total as well?"
)
