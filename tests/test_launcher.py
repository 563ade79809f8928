import pytest

from aflcc.launcher import Launcher
from aflcc.log import FatalError
from aflcc.rewriter import Rewriter
from conftest import FakeExec, make_config

def plan_for(argv, env=None):
    return Rewriter(make_config(env), "/afl", True).edit_params(argv)

class TestLauncher:

    def test_execs_compiler_with_plan(self):
        plan = plan_for(["afl-gcc", "a.c"])
        execvp = FakeExec()
        Launcher(plan).run(execvp, {})
        assert execvp.calls == [("gcc", list(plan.params))]

    def test_exports_plan_env(self):
        environ = {"PATH": "/usr/bin"}
        plan = plan_for(["afl-clang", "-fsanitize=address", "a.c"])
        Launcher(plan).run(FakeExec(), environ)
        assert environ == {"PATH": "/usr/bin", "AFL_USE_ASAN": "1", "__AFL_CLANG_MODE": "1"}

    def test_exec_failure_is_fatal(self):
        plan = plan_for(["afl-gcc", "a.c"], {"AFL_CC": "no-such-cc"})
        execvp = FakeExec(FileNotFoundError(2, "No such file or directory"))
        with pytest.raises(FatalError) as e:
            Launcher(plan).run(execvp, {})
        assert str(e.value) == "Oops, failed to execute 'no-such-cc' - check your PATH"
        assert len(execvp.calls) == 1
