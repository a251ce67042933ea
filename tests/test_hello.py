from fearless.hello import greeting, main, parallel_greeting


def test_greeting_text():
    assert greeting() == "GREETINGS, HUMANS"


def test_parallel_greeting_prints(capsys):
    text = parallel_greeting()
    assert capsys.readouterr().out == text + "\n"
    assert text == greeting()


def test_main_sequential(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == greeting() + "\n"


def test_main_parallel(capsys):
    assert main(["--parallel"]) == 0
    assert capsys.readouterr().out == greeting() + "\n"