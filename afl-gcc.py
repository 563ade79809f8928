#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys

from aflcc.main import main

## Link as afl-g++.py / afl-clang.py / afl-clang++.py to pick the compiler
if __name__ == "__main__":
    sys.exit(main(sys.argv))
