import pytest

from fearless.locks import condvar_example, main, rwlock_example, writer_example


def test_condvar_each_reader_wakes_at_least_target_times():
    results = condvar_example(3, 2, 4)
    assert len(results) == 3
    assert all(wakes >= 2 for wakes in results)


def test_rwlock_each_reader_succeeds_at_least_target_times():
    results = rwlock_example(3, 2, 4)
    assert len(results) == 3
    for failures, successes in results:
        assert successes >= 2
        assert failures >= 0


def test_writer_readers_see_every_value():
    readers, zeros, modulus = 3, 2, 4
    results = writer_example(readers, zeros, modulus)
    assert results == [modulus * zeros] * readers


def test_writer_with_wider_counter():
    readers, zeros, modulus = 2, 1, 200
    results = writer_example(readers, zeros, modulus)
    assert results == [modulus * zeros] * readers


@pytest.mark.parametrize("example", [condvar_example, rwlock_example, writer_example])
def test_invalid_modulus(example):
    with pytest.raises(ValueError):
        example(2, 1, 0)


@pytest.mark.parametrize("example", [condvar_example, rwlock_example, writer_example])
def test_invalid_reader_count(example):
    with pytest.raises(ValueError):
        example(0, 1, 4)


def test_main_prints_one_line_per_reader(capsys):
    readers, zeros, modulus = 2, 1, 3
    main(["writer", "--readers", str(readers), "--zeros", str(zeros), "--modulus", str(modulus)])
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(modulus * zeros)] * readers