from collections import namedtuple

Bucket = namedtuple('Bucket', ['start', 'end', 'count'])


class HistogramError(ValueError):
    pass


class HistogramRangeError(HistogramError):
    pass


class Histogram:
    """Logarithmic-bucket frequency table over [0, 2**max_value_power).

    Values below 2**(grouping_power + 1) are counted exactly. Above that, every
    power-of-two range [2**k, 2**(k + 1)) is split into 2**grouping_power
    buckets of equal width, so the relative error stays below
    2**-grouping_power while memory only grows with max_value_power.
    """

    def __init__(self, grouping_power, max_value_power):
        if not 0 <= grouping_power < max_value_power <= 64:
            raise HistogramError('Invalid histogram shape: grouping_power=%s, max_value_power=%s'
                                 % (grouping_power, max_value_power))
        self.grouping_power = grouping_power
        self.max_value_power = max_value_power
        self.cutoff = 1 << (grouping_power + 1)
        self.max_value = (1 << max_value_power) - 1
        self.buckets = [0] * ((max_value_power - grouping_power + 1) << grouping_power)

    def __len__(self):
        return len(self.buckets)

    def index_of(self, value):
        if value < 0 or value > self.max_value:
            raise HistogramRangeError('Value %s out of range [0, %s]' % (value, self.max_value))
        if value < self.cutoff:
            return value
        power = value.bit_length() - 1
        shift = power - self.grouping_power
        offset = (value >> shift) - (1 << self.grouping_power)
        return self.cutoff + ((power - self.grouping_power - 1) << self.grouping_power) + offset

    def bucket_range(self, index):
        if not 0 <= index < len(self.buckets):
            raise IndexError('Bucket index %s out of range' % index)
        if index < self.cutoff:
            return index, index
        group, offset = divmod(index - self.cutoff, 1 << self.grouping_power)
        shift = group + 1
        start = ((1 << self.grouping_power) + offset) << shift
        return start, start + (1 << shift) - 1

    def add(self, value, weight=1):
        if weight < 0:
            raise HistogramError('Negative weight: %s' % weight)
        self.buckets[self.index_of(value)] += weight

    def total(self):
        return sum(self.buckets)

    def __iter__(self):
        for index, count in enumerate(self.buckets):
            if count:
                start, end = self.bucket_range(index)
                yield Bucket(start, end, count)

    def __repr__(self):
        return 'Histogram(%s, %s, total=%s)' % (self.grouping_power, self.max_value_power, self.total())
