"""sample.py"""
from progopts import ProgramOptions, one_of, range_reader
from progopts.cli import parse_check

options = ProgramOptions(program_name="sample", footer="filename ...")
options.add("host", "h", "host name", str)
options.add(
    "port", "p", "port number", int, required=False, default=80,
    reader=range_reader(1, 65535),
)
options.add(
    "type", "t", "protocol type", str, required=False, default="http",
    reader=one_of("http", "https", "ssh", "ftp"),
)
options.add_flag("gzip", description="gzip when transfer")
options.add_flag("help", description="print this message")


if __name__ == "__main__":
    parse_check(options)

    print(f"{options.get('type', str)}://{options.get('host', str)}:{options.get('port', int)}")
    if options.exists("gzip"):
        print("gzip")
    for item in options.rest:
        print(f"- {item}")
