import unittest

from parallel_merge.errors import RegionViolationError
from parallel_merge.regions import MergeTask, Region, RegionView, check_partition, partition


class TestPartition(unittest.TestCase):
    def test_contiguity_for_many_lengths(self):
        for n in range(0, 200):
            left, right = partition(n)
            self.assertEqual(left.start, 0)
            self.assertEqual(left.length, n // 2)
            self.assertEqual(right.start, left.length)
            self.assertEqual(right.length, n - left.length)
            self.assertEqual(left.length + right.length, n)

    def test_regions_are_disjoint(self):
        for n in range(0, 100):
            left, right = partition(n)
            self.assertFalse(left.overlaps(right))
            self.assertFalse(set(left.indices()) & set(right.indices()))

    def test_reference_length(self):
        left, right = partition(11)
        self.assertEqual((left.start, left.end), (0, 4))
        self.assertEqual((right.start, right.end), (5, 10))

    def test_degenerate_lengths(self):
        self.assertEqual(partition(0), (Region(0, 0), Region(0, 0)))
        self.assertEqual(partition(1), (Region(0, 0), Region(0, 1)))

    def test_negative_length_rejected(self):
        with self.assertRaises(ValueError):
            partition(-1)

    def test_overlapping_regions_rejected(self):
        with self.assertRaises(RegionViolationError):
            check_partition(Region(0, 3), Region(2, 3), 5)

    def test_gap_rejected(self):
        with self.assertRaises(RegionViolationError):
            check_partition(Region(0, 2), Region(3, 2), 5)

    def test_short_cover_rejected(self):
        with self.assertRaises(RegionViolationError):
            check_partition(Region(0, 2), Region(2, 2), 5)


class TestRegion(unittest.TestCase):
    def test_bounds(self):
        r = Region(3, 4)
        self.assertEqual(r.stop, 7)
        self.assertEqual(r.end, 6)
        self.assertTrue(r.contains(3))
        self.assertTrue(r.contains(6))
        self.assertFalse(r.contains(7))

    def test_empty_region_contains_nothing(self):
        r = Region(5, 0)
        self.assertEqual(r.end, 4)
        self.assertFalse(r.contains(5))
        self.assertFalse(r.overlaps(Region(0, 10)))

    def test_invalid_region(self):
        with self.assertRaises(ValueError):
            Region(-1, 2)


class TestRegionView(unittest.TestCase):
    def test_reads_and_writes_inside_region(self):
        data = [0, 1, 2, 3, 4]
        view = RegionView(data, Region(1, 3))
        view[2] = 20
        self.assertEqual(view[1], 1)
        self.assertEqual(data, [0, 1, 20, 3, 4])
        self.assertEqual(len(view), 3)
        self.assertEqual(list(view), [1, 20, 3])

    def test_access_outside_region_raises(self):
        data = [0, 1, 2, 3, 4]
        view = Region(1, 3).view(data)
        with self.assertRaises(RegionViolationError) as ctx:
            view[0]
        self.assertEqual(ctx.exception.index, 0)
        with self.assertRaises(RegionViolationError):
            view[4] = 9
        self.assertEqual(data, [0, 1, 2, 3, 4])

    def test_negative_index_is_not_wrapped(self):
        view = Region(0, 2).view([1, 2])
        with self.assertRaises(RegionViolationError):
            view[-1]

    def test_region_past_end_rejected(self):
        with self.assertRaises(RegionViolationError):
            RegionView([1, 2], Region(1, 2))

    def test_fixed_length(self):
        view = Region(0, 2).view([1, 2])
        with self.assertRaises(TypeError):
            view.append(3)
        with self.assertRaises(TypeError):
            del view[0]


class TestMergeTask(unittest.TestCase):
    def test_span_covers_both_regions(self):
        left, right = partition(7)
        task = MergeTask(left, right, [0] * 7, [0] * 7)
        self.assertEqual(task.span, Region(0, 7))


if __name__ == "__main__":
    unittest.main()
