"""Console progress reporting for the heat plate solver."""


class ProgressReporter:
    """Prints run progress to standard output.

    Iteration lines are printed on a doubling cadence (1, 2, 4, 8, ...)
    rather than every sweep. With ``verbose=False`` nothing is printed.
    """

    def __init__(self, verbose=True):
        self.verbose = verbose

    @staticmethod
    def should_report(iteration):
        """True if ``iteration`` is a power of two."""
        return iteration >= 1 and (iteration & (iteration - 1)) == 0

    def _print(self, *args):
        if self.verbose:
            print(*args)

    def banner(self, tolerance, num_processors, num_threads):
        self._print()
        self._print(f"The iteration will be repeated until the change is <= {tolerance:e}")
        self._print(f"Number of processors available = {num_processors}")
        self._print(f"Number of threads =              {num_threads}")

    def boundary_mean(self, mean):
        self._print()
        self._print(f"Average = {mean:f}")

    def table_header(self):
        self._print()
        self._print("Iteration  Change")
        self._print()

    def iteration(self, iteration, max_difference, elapsed=None):
        """Report a sweep if it falls on the doubling cadence."""
        if self.should_report(iteration):
            self._print(f"  {iteration:8d}  {max_difference:f}")

    def final(self, iteration, max_difference, elapsed, converged=True):
        self._print()
        self._print(f"  {iteration:8d}  {max_difference:f}")
        self._print()
        if converged:
            self._print("Error tolerance achieved.")
        else:
            self._print("Iteration limit reached.")
        self._print(f"Wallclock time = {elapsed:f}")
