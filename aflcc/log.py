import sys

class FatalError(Exception):
    pass

## Wrapper output always goes to stderr, stdout belongs to the compiler

def say(msg):
    print(msg, file=sys.stderr)

def warn(msg):
    print("[!] WARNING: %s" % msg, file=sys.stderr)

def abort(msg):
    print("[x] PROGRAM ABORT : %s" % msg, file=sys.stderr)
