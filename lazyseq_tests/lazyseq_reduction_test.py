import logging
import suite
from lazyseq import (
    zip_, accumulate, ensure_same_length, from_iterable, count,
    Failure, SequenceError, SequenceConfig, configure, configured, get_config,
    is_failure, END, LENGTH_MISMATCH, INVALID_OPERATOR, POWER_OUT_OF_RANGE
)

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


class _Collect(logging.Handler):
    """keeps emitted records for inspection"""
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


# ensure_same_length() tests

@test("ensure_same_length compares every input to the first")
def test_ensure_same_length():
    assert_that(ensure_same_length([[1, 2], [3, 4], 'ab']), "equal lengths")
    assert_that(not ensure_same_length([[1], [1, 2]]), "second differs")
    assert_that(not ensure_same_length([[1, 2], [1, 2], [1]]), "last differs")


@test("ensure_same_length accepts zero or one input")
def test_ensure_same_length_trivial():
    assert_that(ensure_same_length([]), "no inputs")
    assert_that(ensure_same_length([[1, 2, 3]]), "one input")


# zip_() tests

@test("zip_ yields one tuple per index")
def test_zip_basic():
    result = zip_([1, 2, 3], [4, 5, 6]).to.list()
    assert_that(result == [(1, 4), (2, 5), (3, 6)], f"got {result}")


@test("zip_ keeps input order across three inputs")
def test_zip_three_inputs():
    result = zip_('ab', [1, 2], (True, False)).to.list()
    assert_that(result == [('a', 1, True), ('b', 2, False)], f"got {result}")


@test("zip_ of a single input yields one-element tuples")
def test_zip_single_input():
    assert_that(zip_([1, 2]).to.list() == [(1,), (2,)], "singletons")


@test("zip_ of empty inputs yields nothing")
def test_zip_empty_inputs():
    assert_that(zip_([], []).to.list() == [], "equal, zero length")
    assert_that(zip_().to.list() == [], "no inputs at all")


@test("zip_ materializes inputs without a length")
def test_zip_generator_inputs():
    result = zip_((x for x in range(3)), count(10, 1).take(3)).to.list()
    assert_that(result == [(0, 10), (1, 11), (2, 12)], f"got {result}")


@test("zip_ with mismatched lengths yields exactly one failure")
def test_zip_mismatch():
    result = zip_([1, 2], [1, 2, 3]).to.list()
    assert_that(result == [Failure(LENGTH_MISMATCH)], f"got {result}")
    assert_that(result[0].is_failure, "failure is tagged")
    assert_that(str(result[0]) == "all parameters must be of the same length", "descriptive message")


@test("zip_ in inline mode yields the bare message")
def test_zip_mismatch_inline():
    result = zip_([1], [], error_mode='inline').to.list()
    assert_that(result == [LENGTH_MISMATCH], f"got {result}")
    assert_that(is_failure(result[0]), "inline failure is still recognised")


@test("zip_ in raise mode raises on the failing pull and closes")
def test_zip_mismatch_raise():
    seq = zip_([1], [1, 2], error_mode='raise')
    error = assert_raises(SequenceError, seq.pull)
    assert_that(error.failure == Failure(LENGTH_MISMATCH), "error carries the failure")
    assert_that(str(error) == LENGTH_MISMATCH, "error message")
    assert_that(seq.closed, "sequence closes after the error")
    assert_that(seq.pull() is END, "nothing after the error")


@test("zip_ rejects an unknown error mode immediately")
def test_zip_bad_error_mode():
    assert_raises(ValueError, lambda: zip_([1], [2], error_mode='loud'))


# accumulate() tests

@test("accumulate adds by default")
def test_accumulate_add():
    assert_that(accumulate([1, 2, 3]).to.list() == [1, 3, 6], "running sum")
    assert_that(accumulate([1, 2, 3], "add", 0).to.list() == [1, 3, 6], "explicit add")
    assert_that(accumulate([1, 2, 3], "").to.list() == [1, 3, 6], "empty operator means add")


@test("accumulate with a start yields it first and shifts every total")
def test_accumulate_start():
    result = accumulate([1, 2, 3], "add", 10).to.list()
    assert_that(result == [10, 11, 13, 16], f"got {result}")
    negative = accumulate([1, 2], "add", -1).to.list()
    assert_that(negative == [-1, 0, 2], f"got {negative}")


@test("accumulate multiplies")
def test_accumulate_multiply():
    assert_that(accumulate([2, 3], "multiply", 0).to.list() == [2, 6], "running product")
    assert_that(accumulate([-2, 3, 0, 5], "multiply").to.list() == [-2, -6, 0, 0], "signs and zero")


@test("accumulate raises to a power with float truncation")
def test_accumulate_power():
    assert_that(accumulate([2, 3, 2], "power").to.list() == [2, 8, 64], "repeated powers")
    assert_that(accumulate([5, 0], "power").to.list() == [5, 1], "zero exponent")
    assert_that(accumulate([2, -1], "power").to.list() == [2, 0], "0.5 truncates to 0")
    assert_that(accumulate([2, 3], "power", 1).to.list() == [1, 3, 9], "start shifts powers")


@test("accumulate of a single item yields it once")
def test_accumulate_single():
    assert_that(accumulate([4], "multiply").to.list() == [4], "one item")


@test("accumulate with an unknown operator yields exactly one failure")
def test_accumulate_bad_operator():
    result = accumulate([1], "bogus", 0).to.list()
    assert_that(result == [Failure(INVALID_OPERATOR)], f"got {result}")
    with_start = accumulate([1, 2, 3], "subtract", 5).to.list()
    assert_that(with_start == [Failure(INVALID_OPERATOR)], f"no other output, got {with_start}")


@test("accumulate bad operator follows the error mode")
def test_accumulate_bad_operator_modes():
    inline = accumulate([1, 2], "bogus", error_mode='inline').to.list()
    assert_that(inline == ["not valid operator"], f"got {inline}")
    seq = accumulate([1, 2], "bogus", error_mode='raise')
    assert_raises(SequenceError, lambda: seq.to.list())


@test("accumulate ends with a failure when a power leaves the float range")
def test_accumulate_power_overflow():
    result = accumulate([10, 400], "power").to.list()
    assert_that(result == [10, Failure(POWER_OUT_OF_RANGE)], f"got {result}")
    shifted = accumulate([10, 400, 2], "power", 3).to.list()
    assert_that(shifted == [3, 13, Failure(POWER_OUT_OF_RANGE)], f"nothing after the failure, got {shifted}")


@test("accumulate ends with a failure for zero raised to a negative power")
def test_accumulate_power_zero_negative():
    result = accumulate([0, -1], "power").to.list()
    assert_that(result == [0, Failure(POWER_OUT_OF_RANGE)], f"got {result}")


@test("accumulate power failures follow the error mode")
def test_accumulate_power_failure_modes():
    inline = accumulate([10, 400], "power", error_mode='inline').to.list()
    assert_that(inline == [10, POWER_OUT_OF_RANGE], f"got {inline}")
    assert_that(is_failure(inline[-1]), "inline power failure is recognised")
    seq = accumulate([0, -1], "power", error_mode='raise')
    assert_that(seq.pull() == 0, "value before the failure")
    assert_raises(SequenceError, seq.pull)
    assert_that(seq.pull() is END, "closed after the failure")


@test("accumulate over empty input yields nothing")
def test_accumulate_empty():
    assert_that(accumulate([]).to.list() == [], "no start")
    assert_that(accumulate([], "add", 10).to.list() == [], "start is not yielded either")


@test("accumulate reads any iterable of ints")
def test_accumulate_iterable_input():
    result = accumulate(from_iterable([1, 2, 3]), "multiply").to.list()
    assert_that(result == [1, 2, 6], f"got {result}")


@test("accumulate is lazy over an infinite input")
def test_accumulate_infinite():
    result = accumulate(count(1, 1)).take(5).to.list()
    assert_that(result == [1, 3, 6, 10, 15], f"triangular numbers, got {result}")


# configuration tests

@test("config rejects unknown error modes")
def test_config_validation():
    assert_raises(ValueError, lambda: SequenceConfig(error_mode='silent'))
    assert_that(SequenceConfig().error_mode == 'tagged', "tagged by default")


@test("configured overrides the error mode inside the block only")
def test_configured_block():
    with configured(error_mode='inline') as config:
        assert_that(config.error_mode == 'inline', "yields the active config")
        seq = zip_([1], [1, 2])
    assert_that(get_config().error_mode == 'tagged', "restored after the block")
    assert_that(seq.to.list() == [LENGTH_MISMATCH], "mode is fixed when the sequence is created")


@test("configure replaces the process-wide config")
def test_configure_global():
    try:
        configure(error_mode='raise')
        assert_that(get_config().error_mode == 'raise', "mode changed")
        assert_raises(SequenceError, lambda: accumulate([1], "bogus").to.list())
        result = accumulate([1], "bogus", error_mode='tagged').to.list()
        assert_that(result == [Failure(INVALID_OPERATOR)], "per-call override wins")
    finally:
        configure(error_mode='tagged')


@test("failures are logged as warnings unless disabled")
def test_failure_logging():
    handler = _Collect()
    logger = logging.getLogger("lazyseq.factories")
    logger.addHandler(handler)
    try:
        zip_([1], [1, 2]).to.list()
        assert_that(any(LENGTH_MISMATCH in r.getMessage() for r in handler.records), "warning emitted")
        assert_that(all(r.levelno == logging.WARNING for r in handler.records), "at warning level")

        handler.records.clear()
        with configured(log_failures=False):
            zip_([1], [1, 2]).to.list()
        assert_that(handler.records == [], "no record with log_failures off")
    finally:
        logger.removeHandler(handler)


if __name__ == "__main__":
    suite.run(title="lazyseq zip and accumulate test suite")
