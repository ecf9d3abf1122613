"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["touch", "mkdir", "ls", "exists", "stat", "clear", "exit", "help"]

STYLE = Style.from_dict(
    {
        "prompt": "#2E9AFE bold",
        "command": "#0088ff bold",
    }
)

GREEN = "\033[32m"
BLUE = "\033[38;2;46;154;254m"
RESET = "\033[0m"

LOGO = f"""{BLUE}
  ██████╗ ██████╗ ██╗██████╗ ███████╗███████╗
 ██╔════╝ ██╔══██╗██║██╔══██╗██╔════╝██╔════╝
 ██║  ███╗██████╔╝██║██║  ██║█████╗  ███████╗
 ██║   ██║██╔══██╗██║██║  ██║██╔══╝  ╚════██║
 ╚██████╔╝██║  ██║██║██████╔╝██║     ███████║
  ╚═════╝ ╚═╝  ╚═╝╚═╝╚═════╝ ╚═╝     ╚══════╝
{RESET}"""

WELCOME_TITLE = "GridFS CLI - Hierarchical namespace over a flat store"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "gridfs> "

HELP_TEXT = """Available commands:
  touch <path>          Create an empty file (parent directory must exist)
  mkdir [-p] <path>     Create a directory (-p also creates missing parents)
  ls [path]             List direct children of a directory (default: /)
  exists <path>         Check whether a path exists
  stat <path>           Show metadata of a file or directory
  clear                 Clear screen and redisplay welcome message
  help                  Show this help
  exit                  Exit REPL

Examples:
  mkdir -p /data/logs
  touch /data/logs/today.txt
  ls /data
  stat /data/logs/today.txt"""
