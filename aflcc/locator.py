import os

from aflcc.config import AFL_PATH_DEFAULT
from aflcc.log import FatalError

class Locator:

    def __init__(self, config, default_dir=AFL_PATH_DEFAULT):
        self.config = config
        self.default_dir = default_dir

    def find_as(self, argv0):
        ## AFL_PATH first, a miss here is not fatal yet
        afl_path = self.config.afl_path
        if afl_path is not None and self.probe(afl_path, "as"):
            return afl_path

        ## Then the directory we were started from
        slash = argv0.rfind("/")
        if slash != -1:
            dir_path = argv0[:slash]
            if self.probe(dir_path, "afl-as"):
                return dir_path

        ## Then the install location
        if self.probe(self.default_dir, "as"):
            return self.default_dir

        raise FatalError("Unable to find AFL wrapper binary for 'as'. Please set AFL_PATH")

    def probe(self, dir_path, name):
        # plain join, "" + "/afl-as" must stay "/afl-as"
        return os.access("%s/%s" % (dir_path, name), os.X_OK)
