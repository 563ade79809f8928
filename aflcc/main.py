import os
import sys

from aflcc import log
from aflcc.config import Config, VERSION, BIN_PATH
from aflcc.launcher import Launcher
from aflcc.locator import Locator
from aflcc.log import FatalError
from aflcc.rewriter import Rewriter

HELP = (
    "\n"
    "This is a helper application for afl-fuzz. It serves as a drop-in replacement\n"
    "for gcc or clang, letting you recompile third-party code with the required\n"
    "runtime instrumentation. A common use pattern would be one of the following:\n\n"
    "  CC=%s/afl-gcc ./configure\n"
    "  CXX=%s/afl-g++ ./configure\n\n"
    "You can specify custom next-stage toolchain via AFL_CC, AFL_CXX, and AFL_AS.\n"
    "Setting AFL_HARDEN enables hardening optimizations in the compiled code.\n"
) % (BIN_PATH, BIN_PATH)

def is_tty(stream):
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return False

def main(argv, config=None, execvp=os.execvp, environ=None):
    config = config or Config()

    if is_tty(sys.stderr) and not config.quiet:
        log.say("afl-cc %s by <lcamtuf@google.com>" % VERSION)
        be_quiet = False
    else:
        be_quiet = True

    if len(argv) < 2:
        log.say(HELP)
        return 1

    try:
        as_path = Locator(config).find_as(argv[0])
        plan = Rewriter(config, as_path, be_quiet).edit_params(argv)
        Launcher(plan).run(execvp, environ)
    except FatalError as e:
        log.abort(e)
        return 1

    return 0

def run():
    sys.exit(main(sys.argv))

if __name__ == "__main__":
    run()
