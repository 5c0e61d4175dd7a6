# Filename: solver.py

""" Driving an LP solver.

    A Solver turns a SolverRequest (the LP) into a SolverResponse (the
    text of the solver's result file, None when the solver wrote none
    because the program is infeasible, and the reported solve time).

    GurobiSolver hands the program to gurobi_cl through a pair of
    scratch files; FakeSolver answers from memory and is used in tests.
"""

import logging
import os
import re
import subprocess
import threading

from routing.config import LP_DIR, GUROBI_METHOD, OPTIMALITY_TOL
from routing.errors import SolverError
from routing.lp import string_of_lp

log = logging.getLogger(__name__)

GUROBI_CL = "gurobi_cl"

TIME_REGEX = re.compile(r"Solved in [0-9]+ iterations and ([0-9.e+-]+) seconds")

class SolverRequest(object):

    def __init__(self, lp):
        self.lp = lp
        self._text = None

    @property
    def text(self):
        if self._text is None:
            self._text = string_of_lp(self.lp)
        return self._text

class SolverResponse(object):

    def __init__(self, result_text, solve_time=0.0):
        self.result_text = result_text
        self.solve_time = solve_time

    def lines(self):
        if self.result_text is None:
            return []
        return self.result_text.splitlines()

class Solver(object):

    def solve(self, request):
        raise NotImplementedError

class ScratchNamer(object):

    """ Hands out scratch file stems lp_dir/prefix_<random> that are
        neither on disk nor handed out and not yet released.

        The check and the later file creation are not atomic; concurrent
        pipelines rely on the random suffix being unlikely to collide.
    """

    def __init__(self, rng, lp_dir=LP_DIR, prefix="edksp"):
        self.rng = rng
        self.lp_dir = lp_dir
        self.prefix = prefix
        self.issued = set()

    def _taken(self, stem):
        return (stem in self.issued or os.path.exists(stem + ".lp")
                or os.path.exists(stem + ".sol"))

    def new_name(self):
        while True:
            suffix = "%.12f" % self.rng.random()
            stem = os.path.join(self.lp_dir, "%s_%s" % (self.prefix, suffix))
            if not self._taken(stem):
                self.issued.add(stem)
                return stem

    def release(self, stem):
        self.issued.discard(stem)

def remove_quietly(filename):
    try:
        os.remove(filename)
    except FileNotFoundError:
        pass

class GurobiSolver(Solver):

    def __init__(self, rng, method=GUROBI_METHOD, lp_dir=LP_DIR,
                 keep_files=False, timeout=None, command=GUROBI_CL):
        self.namer = ScratchNamer(rng, lp_dir)
        self.method = method
        self.lp_dir = lp_dir
        self.keep_files = keep_files
        self.timeout = timeout
        self.command = command

    @classmethod
    def from_config(cls, config):
        return cls(config.make_rng(), method=config.method,
                   lp_dir=config.lp_dir, keep_files=config.keep_files,
                   timeout=config.timeout)

    def command_line(self, lp_filename, sol_filename):
        return [self.command,
                "Method=%d" % self.method,
                "OptimalityTol=%s" % OPTIMALITY_TOL,
                "ResultFile=%s" % sol_filename,
                lp_filename]

    def solve(self, request):
        try:
            os.makedirs(self.lp_dir, exist_ok=True)
        except OSError as e:
            raise SolverError("cannot create %s: %s" % (self.lp_dir, e))

        stem = self.namer.new_name()
        lp_filename = stem + ".lp"
        sol_filename = stem + ".sol"

        try:
            try:
                with open(lp_filename, "w") as f:
                    f.write(request.text)
            except OSError as e:
                raise SolverError("cannot write %s: %s" % (lp_filename, e))

            solve_time = self._run(lp_filename, sol_filename)

            if not os.path.exists(sol_filename):
                log.debug("%s wrote no result, infeasible", self.command)
                return SolverResponse(None, solve_time)

            try:
                with open(sol_filename, encoding="utf-8") as f:
                    return SolverResponse(f.read(), solve_time)
            except (OSError, UnicodeDecodeError) as e:
                raise SolverError("cannot read %s: %s" % (sol_filename, e))
        finally:
            if self.keep_files:
                log.info("keeping %s and %s", lp_filename, sol_filename)
            else:
                remove_quietly(lp_filename)
                remove_quietly(sol_filename)
            self.namer.release(stem)

    def _run(self, lp_filename, sol_filename):

        """ run the solver to completion, return the reported time """

        cmd = self.command_line(lp_filename, sol_filename)
        log.debug("running %s", " ".join(cmd))

        try:
            proc = subprocess.Popen(cmd, stdin=subprocess.DEVNULL,
                                    stdout=subprocess.PIPE,
                                    universal_newlines=True,
                                    errors="replace")
        except OSError as e:
            raise SolverError("cannot run %s: %s" % (self.command, e))

        timer = None
        timed_out = threading.Event()
        if self.timeout is not None:
            def _kill():
                timed_out.set()
                proc.kill()
            timer = threading.Timer(self.timeout, _kill)
            timer.start()

        solve_time = 0.0
        try:
            for line in proc.stdout:
                m = TIME_REGEX.match(line)
                if not m:
                    continue
                try:
                    solve_time = float(m.group(1))
                except ValueError:
                    log.warning("cannot read solve time from %r", line)
        finally:
            proc.stdout.close()
            returncode = proc.wait()
            if timer is not None:
                timer.cancel()

        if timed_out.is_set():
            raise SolverError("%s timed out after %s seconds"
                              % (self.command, self.timeout), returncode)
        if returncode != 0:
            raise SolverError("%s exited with status %d"
                              % (self.command, returncode), returncode)

        return solve_time

class FakeSolver(Solver):

    """ answers every request with result, a string, None (infeasible)
        or a callable of the request returning either """

    def __init__(self, result=None, solve_time=0.0):
        self.result = result
        self.solve_time = solve_time
        self.requests = []

    def solve(self, request):
        self.requests.append(request)
        if callable(self.result):
            result_text = self.result(request)
        else:
            result_text = self.result
        return SolverResponse(result_text, self.solve_time)
