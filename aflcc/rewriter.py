from aflcc import log
from aflcc.config import CLANG_ENV_VAR
from aflcc.log import FatalError

NO_BUILTIN = ["strcmp", "strncmp", "strcasecmp", "strncasecmp", "memcmp", "strstr", "strcasestr"]

APPLE_MSG = (
    "\n[-] On Apple systems, 'gcc' is usually just a wrapper for clang. Please use the\n"
    "    'afl-clang' utility instead of 'afl-gcc'. If you really have GCC installed,\n"
    "    set AFL_CC or AFL_CXX to specify the correct path to that compiler."
)

class ArgumentPlan:

    def __init__(self):
        self.params = []
        self.env = {}
        self.clang_mode = False
        self.asan_set = False
        self.fortify_set = False
        self.m32_set = False

    @property
    def compiler(self):
        return self.params[0]

    def append(self, *args):
        self.params.extend(args)

    def freeze(self):
        self.params = tuple(self.params)
        return self

def base_name(argv0):
    name = argv0[argv0.rfind("/") + 1:]
    if name.endswith(".py"):
        name = name[:-3]
    return name

def pick(override, default):
    return default if override is None else override

class Rewriter:
    """Turns the wrapper's argv into the argv of the real compiler.

    User arguments keep their relative order. -B, -integrated-as and -pipe
    are removed, everything we add goes after the user arguments.
    """

    def __init__(self, config, as_path, be_quiet=False):
        self.config = config
        self.as_path = as_path
        self.be_quiet = be_quiet

    def edit_params(self, argv):
        plan = ArgumentPlan()
        plan.append(self.select_compiler(base_name(argv[0]), plan))
        self.copy_params(argv[1:], plan)
        self.add_params(plan)
        return plan.freeze()

    def select_compiler(self, name, plan):
        config = self.config

        if name.startswith("afl-clang"):
            plan.clang_mode = True
            plan.env[CLANG_ENV_VAR] = "1"
            if name == "afl-clang++":
                return pick(config.afl_cxx, "clang++")
            return pick(config.afl_cc, "clang")

        ## With GCJ and Eclipse installed you can actually compile Java
        if name == "afl-g++":
            cc, default = config.afl_cxx, "g++"
        elif name == "afl-gcj":
            cc, default = config.afl_gcj, "gcj"
        else:
            cc, default = config.afl_cc, "gcc"

        if config.is_apple:
            # gcc on macOS is clang in disguise
            if cc is None:
                log.say(APPLE_MSG)
                raise FatalError("AFL_CC or AFL_CXX required on MacOS X")
            return cc

        return pick(cc, default)

    def copy_params(self, args, plan):
        idx = 0
        while idx < len(args):
            cur = args[idx]
            idx += 1

            if cur.startswith("-B"):
                if not self.be_quiet:
                    log.warn("-B is already set, overriding")
                ## -B <dir>, drop the directory too
                if cur == "-B" and idx < len(args):
                    idx += 1
                continue

            if cur in ("-integrated-as", "-pipe"):
                continue

            if cur == "-m32" and self.config.is_freebsd_x86_64:
                plan.m32_set = True

            if cur in ("-fsanitize=address", "-fsanitize=memory"):
                plan.asan_set = True

            if "FORTIFY_SOURCE" in cur:
                plan.fortify_set = True

            plan.append(cur)

    def add_params(self, plan):
        config = self.config

        plan.append("-B", self.as_path)

        if plan.clang_mode:
            plan.append("-no-integrated-as")

        if config.harden:
            plan.append("-fstack-protector-all")
            if not plan.fortify_set:
                plan.append("-D_FORTIFY_SOURCE=2")

        if plan.asan_set:
            ## Pass this on to afl-as to adjust map density
            plan.env["AFL_USE_ASAN"] = "1"
        elif config.use_asan:
            if config.use_msan:
                raise FatalError("ASAN and MSAN are mutually exclusive")
            if config.harden:
                raise FatalError("ASAN and AFL_HARDEN are mutually exclusive")
            plan.append("-U_FORTIFY_SOURCE", "-fsanitize=address")
        elif config.use_msan:
            if config.use_asan:
                raise FatalError("ASAN and MSAN are mutually exclusive")
            if config.harden:
                raise FatalError("MSAN and AFL_HARDEN are mutually exclusive")
            plan.append("-U_FORTIFY_SOURCE", "-fsanitize=memory")

        if not config.dont_optimize:
            # clang -g -m32 is broken on 64-bit FreeBSD
            if not (config.is_freebsd_x86_64 and plan.clang_mode and plan.m32_set):
                plan.append("-g")
            plan.append("-O3", "-funroll-loops")
            ## One AFL-specific, one shared with libFuzzer
            plan.append("-D__AFL_COMPILER=1", "-DFUZZING_BUILD_MODE_UNSAFE_FOR_PRODUCTION=1")

        if config.no_builtin:
            plan.append(*["-fno-builtin-%s" % fn for fn in NO_BUILTIN])
