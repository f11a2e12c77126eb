import sys

from rich.pretty import pprint

from argbind import *

options = Options()
outfile = options.register(str, "o", "outfile", "Output file name", "out.dat")
count = options.register(int, "c", "count", "Number of loops", 13)
ws = options.register(list[int], "w", "w", "Window sizes (repeatable)")
files = options.register(list[str])


if __name__ == '__main__':
    if populate_with_help(options, sys.argv, helper=Helper("usage: main.py [options] [-] FILE...", colorful=True)):
        sys.exit(1)
    pprint(options)
    pprint({"outfile": outfile.value, "count": count.value, "ws": ws.value, "files": files.value})
