import math
from bisect import bisect_left


def dist(p1, p2):
    return math.sqrt((p1[0] - p2[0]) ** 2 + (p1[1] - p2[1]) ** 2)


def brute(points):
    """ Minimum distance over every unordered pair of points, O(n^2).
    """
    n = len(points)
    if n < 2:
        raise ValueError("need at least 2 points for a pairwise distance, got %i" % n)

    mi = dist(points[0], points[1])
    for i in range(n - 1):
        for j in range(i + 1, n):
            d = dist(points[i], points[j])
            if d < mi:
                mi = d
    return mi


def sort_x(points):
    """ New list ordered by x, ties broken by y. """
    return sorted(points, key=lambda p: (p[0], p[1]))


def sort_y(points):
    """ New list ordered by y, ties broken by x. """
    return sorted(points, key=lambda p: (p[1], p[0]))


def median_ties(px, mid):
    """ Copies of px[mid] that sit in px[:mid] of the x-sorted points. """
    return mid - bisect_left(px, px[mid], 0, mid)


def split_y(py, mid_point, mid, ties=0):
    """
    Partition the y-sorted points into the halves matching px[:mid] and
    px[mid:], keeping y order in both.

    `ties` is the number of copies of `mid_point` itself that sit in
    px[:mid]; they are the only points equal to the median that go left.
    """
    mx, my = mid_point[0], mid_point[1]
    pyl = []
    pyr = []
    for p in py:
        if len(pyl) < mid:
            if p[0] < mx or (p[0] == mx and p[1] < my):
                pyl.append(p)
                continue
            if ties > 0 and p[0] == mx and p[1] == my:
                ties -= 1
                pyl.append(p)
                continue
        pyr.append(p)
    return pyl, pyr


def strip_closest(strip, d):
    """
    Closest distance inside a y-sorted strip, starting from the bound d.

    For each point only its successors with a y gap below the running
    minimum are compared; the packing bound keeps that to a handful.
    """
    best = d
    ln = len(strip)
    for i in range(ln):
        pi = strip[i]
        j = i + 1
        while j < ln and strip[j][1] - pi[1] < best:
            dd = dist(pi, strip[j])
            if dd < best:
                best = dd
            j += 1
    return best


def min_dist_pair(px, py):
    n = len(px)
    if n <= 3:
        return brute(px)

    mid = n // 2
    mid_point = px[mid]

    ties = median_ties(px, mid)
    pyl, pyr = split_y(py, mid_point, mid, ties)

    dl = min_dist_pair(px[:mid], pyl)
    dr = min_dist_pair(px[mid:], pyr)
    d = min(dl, dr)

    strip = [p for p in py if abs(p[0] - mid_point[0]) < d]
    return min(d, strip_closest(strip, d))


def closest(points):
    """
    Minimum pairwise euclidean distance of a 2D point set, O(n log n).

    `points` is any sequence of (x, y) pairs, including an (n, 2) array.
    """
    a = [(float(x), float(y)) for x, y in points]
    if len(a) < 2:
        raise ValueError("need at least 2 points for a pairwise distance, got %i" % len(a))

    ax = sort_x(a)
    ay = sort_y(a)
    return min_dist_pair(ax, ay)


if __name__ == '__main__':
    import time
    import numpy as np

    np.random.seed(0)
    n = 2000
    x = np.random.uniform(0, 100, n)
    y = np.random.uniform(0, 100, n)
    pts = list(zip(x, y))

    t = time.time()
    print("recursive:", closest(pts))
    print("time", time.time() - t)
    print()

    t = time.time()
    print("brute:", brute(pts))
    print("time", time.time() - t)
