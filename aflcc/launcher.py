import os

from aflcc.log import FatalError

class Launcher:

    def __init__(self, plan):
        self.plan = plan

    def run(self, execvp=os.execvp, environ=None):
        ## afl-as reads these after exec
        environ = os.environ if environ is None else environ
        environ.update(self.plan.env)
        try:
            execvp(self.plan.compiler, list(self.plan.params))
        except OSError:
            raise FatalError("Oops, failed to execute '%s' - check your PATH" % self.plan.compiler)
