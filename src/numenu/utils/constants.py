"""Constants used throughout numenu."""

# Choice reserved for "go back" / "exit"
BACK_CHOICE = 0

# Default prompt shown when reading a choice
DEFAULT_PROMPT = "\nChoice >> "

# Labels for the index-0 line
EXIT_LABEL = "Exit"
BACK_LABEL = "Go back."

# User-facing messages
INVALID_CHOICE_MESSAGE = "Invalid choice!"
INVALID_INPUT_MESSAGE = "Invalid choice! Please enter a number."
PAUSE_MESSAGE = "Please press enter to continue..."
ERROR_PAUSE_MESSAGE = (
    "Please read error message after that you can press enter to continue..."
)

# Environment variables
ENV_DEBUG = "NUMENU_DEBUG"
ENV_DEBUG_LOG = "NUMENU_DEBUG_LOG"

# Exit code used by the CLI when interrupted with Ctrl+C
INTERRUPTED_EXIT_CODE = 130
