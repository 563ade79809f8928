import os
import sys
import platform

VERSION = "2.52b"
BIN_PATH = "/usr/local/bin"
AFL_PATH_DEFAULT = "/usr/local/lib/afl"

## Exported to afl-as so it knows which compiler produced the assembly
CLANG_ENV_VAR = "__AFL_CLANG_MODE"

class Config:

    def __init__(self, env=None, system=None, machine=None):
        self.env = os.environ if env is None else env
        self.system = sys.platform if system is None else system
        self.machine = platform.machine() if machine is None else machine

    def get(self, name):
        return self.env.get(name)

    def is_set(self, name):
        # presence is what counts, AFL_HARDEN= still enables hardening
        return name in self.env

    @property
    def afl_path(self):
        return self.get("AFL_PATH")

    @property
    def afl_cc(self):
        return self.get("AFL_CC")

    @property
    def afl_cxx(self):
        return self.get("AFL_CXX")

    @property
    def afl_gcj(self):
        return self.get("AFL_GCJ")

    @property
    def harden(self):
        return self.is_set("AFL_HARDEN")

    @property
    def use_asan(self):
        return self.is_set("AFL_USE_ASAN")

    @property
    def use_msan(self):
        return self.is_set("AFL_USE_MSAN")

    @property
    def dont_optimize(self):
        return self.is_set("AFL_DONT_OPTIMIZE")

    @property
    def no_builtin(self):
        return self.is_set("AFL_NO_BUILTIN")

    @property
    def quiet(self):
        return self.is_set("AFL_QUIET")

    @property
    def is_apple(self):
        return self.system == "darwin"

    @property
    def is_freebsd_x86_64(self):
        return self.system.startswith("freebsd") and self.machine in ("amd64", "x86_64")
