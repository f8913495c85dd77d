"""prompt_missing.py"""
from prompt_toolkit import prompt

from progopts import ProgramOptions, range_reader
from progopts.validators import option_validator

options = ProgramOptions(program_name="prompt_missing")
options.add(
    "port", "p", "port number", int, required=False, default=80,
    reader=range_reader(1, 65535),
)

if __name__ == "__main__":
    import sys

    if not options.parse(sys.argv):
        print(options.all_errors(), end="")
        sys.exit(1)
    if not options.exists("port"):
        port = int(prompt("Port: ", validator=option_validator(options, "port")))
    else:
        port = options.get("port", int)
    print(f"Using port {port}")
