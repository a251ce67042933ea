import threading

from hypothesis import given
from hypothesis import strategies as st

from fearless.treiber import Stack

_ops = st.lists(
    st.one_of(st.tuples(st.just("push"), st.integers()), st.just(("pop",)))
)


@given(_ops)
def test_matches_list_model(ops):
    model = []
    stack = Stack()
    for op in ops:
        if op[0] == "push":
            model.append(op[1])
            stack.push(op[1])
        else:
            expected = model.pop() if model else None
            assert stack.pop() == expected


def test_last_in_first_out():
    stack = Stack()
    for item in ("a", "b", "c"):
        stack.push(item)
    assert [stack.pop(), stack.pop(), stack.pop(), stack.pop()] == [
        "c",
        "b",
        "a",
        None,
    ]


def test_concurrent_pushes_all_popped():
    stack = Stack()

    def work(base):
        for i in range(300):
            stack.push((base, i))

    threads = [threading.Thread(target=work, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    popped = []
    while (item := stack.pop()) is not None:
        popped.append(item)
    assert sorted(popped) == sorted((n, i) for n in range(4) for i in range(300))