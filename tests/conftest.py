import os

from aflcc.config import Config

def make_config(env=None, system="linux", machine="x86_64"):
    return Config(dict(env or {}), system=system, machine=machine)

def make_exe(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n")
    os.chmod(str(path), 0o755)
    return path

class FakeExec:

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def __call__(self, file, args):
        self.calls.append((file, args))
        if self.error:
            raise self.error
