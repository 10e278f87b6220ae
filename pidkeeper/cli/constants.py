"""CLI constants and styling."""

# Nord color scheme
NORD_BLUE = "#88c0d0"  # nord8
NORD_DARK = "#4c566a"  # nord3

# Exit codes
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_NOT_RUNNING = 3  # LSB init-script convention for "status"
