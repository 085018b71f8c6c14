"""
Timing harness comparing brute force and divide and conquer closest pair.

Writes one `n,time_brute,time_dc` row per tested size.
"""
import time

import numpy as np
import matplotlib.pyplot as plt
from openmdao.utils.options_dictionary import OptionsDictionary

from closest_pair import closest, brute


SIZES = [100, 200, 300, 400, 500, 600, 700, 800, 900,
         1000, 2000, 3000, 4000, 5000]


def experiment_options():
    options = OptionsDictionary()
    options.declare('sizes', types=list, default=list(SIZES),
                    desc='number of points of each experiment')
    options.declare('filename', types=str, default='results.csv')
    options.declare('seed', types=int, default=None, allow_none=True)
    options.declare('check', types=bool, default=True,
                    desc='fail if the two methods disagree')
    options.declare('plot', types=bool, default=False)
    return options


def random_points(n, low=0.0, high=10000.0, seed=None, rng=None):
    if rng is None:
        rng = np.random.default_rng(seed)
    return rng.uniform(low, high, (n, 2))


def time_call(func, points):
    t = time.perf_counter()
    result = func(points)
    return result, time.perf_counter() - t


def run_experiments(sizes, filename='results.csv', seed=None, check=True, verbose=True):
    rng = np.random.default_rng(seed)
    results = np.zeros((len(sizes), 3))

    for k, n in enumerate(sizes):
        pts = [tuple(p) for p in random_points(n, rng=rng).tolist()]

        if verbose:
            print("========== n = %i ==========" % n)

        d_brute, time_brute = time_call(brute, pts)
        d_dc, time_dc = time_call(closest, pts)

        if verbose:
            print("brute:", d_brute, "time", time_brute)
            print("recursive:", d_dc, "time", time_dc)

        if check and abs(d_brute - d_dc) > 1e-9 * max(1.0, d_brute):
            raise RuntimeError("methods disagree for n = %i: brute %r, recursive %r"
                               % (n, d_brute, d_dc))

        results[k] = n, time_brute, time_dc

    np.savetxt(filename, results, fmt=['%d', '%f', '%f'], delimiter=',',
               header='n,time_brute,time_dc', comments='')

    if verbose:
        print("results saved to", filename)

    return results


def plot_results(results, filename=None):
    results = np.atleast_2d(results)
    n = results[:, 0]

    fig = plt.figure()
    plt.loglog(n, results[:, 1], 'o-', label='brute force')
    plt.loglog(n, results[:, 2], 's-', label='divide and conquer')
    plt.xlabel('n')
    plt.ylabel('time (s)')
    plt.legend()

    if filename is None:
        plt.show()
    else:
        plt.savefig(filename)
    plt.close(fig)


if __name__ == '__main__':
    options = experiment_options()

    t = time.time()
    results = run_experiments(options['sizes'],
                              filename=options['filename'],
                              seed=options['seed'],
                              check=options['check'])
    print(time.time() - t, "seconds")

    if options['plot']:
        plot_results(results)
