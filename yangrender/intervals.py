"""Range and length intervals

An `Intervals` instance holds the closed intervals of a YANG "range" or
"length" restriction after "min" and "max" have been resolved against the
base type, e.g. ((1, 4), (10, 20)) for "1..4 | 10..20".
"""

import decimal

LENGTH_MIN = 0
LENGTH_MAX = 2147483647
"""Bounds of the length domain; a length of exactly this interval restricts
nothing"""

class Intervals(object):
    def __init__(self, intervals):
        self.intervals = tuple((lo, hi) for (lo, hi) in intervals)

    @classmethod
    def domain(cls, lo, hi):
        return cls([(lo, hi)])

    def __str__(self):
        ranges = sorted(self.intervals, key=lambda r: r[0])
        return " | ".join(["%s..%s" % (lo, hi) for (lo, hi) in ranges])

    def __repr__(self):
        return "Intervals(%r)" % (list(self.intervals),)

    def __eq__(self, other):
        if not isinstance(other, Intervals):
            return NotImplemented
        return self.intervals == other.intervals

    def __hash__(self):
        return hash(self.intervals)

    def __len__(self):
        return len(self.intervals)

    def lower(self):
        return self.intervals[0][0]

    def upper(self):
        return self.intervals[-1][1]

    def is_restricted(self):
        """Return False if the receiver is the unrestricted length domain"""
        if len(self.intervals) != 1:
            return True
        (lo, hi) = self.intervals[0]
        return lo != LENGTH_MIN or hi != LENGTH_MAX

    def restrict(self, expr, parse=int):
        """Return new intervals for the "range" or "length" argument `expr`.

        The receiver is the base restriction; "min" and "max" in `expr`
        stand for its lowest and highest bound.  `parse` converts the
        other bounds to numbers.

        Raises ValueError if `expr` is malformed.
        """
        lo = self.lower()
        hi = self.upper()
        def bound(s):
            if s == 'min':
                return lo
            elif s == 'max':
                return hi
            return parse(s)

        res = []
        for part in expr.split('|'):
            ends = [x.strip() for x in part.split('..')]
            if len(ends) == 1:
                v = bound(ends[0])
                res.append((v, v))
            elif len(ends) == 2:
                res.append((bound(ends[0]), bound(ends[1])))
            else:
                raise ValueError('bad interval "%s"' % part.strip())
        return Intervals(res)

def decimal_parser(fraction_digits):
    """Return a parser for decimal64 bounds with `fraction_digits` digits"""
    quantum = decimal.Decimal(1).scaleb(-fraction_digits)
    def parse(s):
        try:
            return decimal.Decimal(s).quantize(quantum)
        except decimal.InvalidOperation:
            raise ValueError('not a decimal: "%s"' % s)
    return parse

def decimal_domain(fraction_digits):
    """Return the value domain of decimal64 with `fraction_digits` digits"""
    lo = decimal.Decimal(-9223372036854775808).scaleb(-fraction_digits)
    hi = decimal.Decimal(9223372036854775807).scaleb(-fraction_digits)
    return Intervals.domain(lo, hi)
