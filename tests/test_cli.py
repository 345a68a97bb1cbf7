import io

from parlourkit.cli import main, run


def scripted(lines):
    items = iter(lines)

    def read():
        try:
            return next(items) + "\n"
        except StopIteration:
            raise EOFError from None

    return read


class Recorder:
    def __init__(self):
        self.parts = []

    def __call__(self, text):
        self.parts.append(text)

    @property
    def text(self):
        return "".join(self.parts)


def test_unknown_choice_exits_without_touching_store(tmp_path):
    root = tmp_path / "shop"
    out = Recorder()
    run(scripted(["5"]), out, root)
    assert not root.exists()
    assert out.text.count("Enter your choice: ") == 1


def test_end_of_input_returns(tmp_path):
    out = Recorder()
    run(scripted([]), out, tmp_path / "shop")
    assert "1. Bakery Management System" in out.text


def test_games_then_exit(tmp_path):
    out = Recorder()
    run(scripted(["2", "4", "3"]), out, tmp_path / "shop")
    assert "###### Game Menu ######" in out.text
    assert out.text.count("Enter your choice: ") == 3


def test_bakery_opens_store(tmp_path):
    root = tmp_path / "shop"
    out = Recorder()
    run(scripted(["1", "3", "3"]), out, root)
    assert root.is_dir()
    assert "BMS MENU" in out.text


def test_bakery_order_through_main_menu(tmp_path):
    root = tmp_path / "shop"
    (root).mkdir()
    (root / "menu.csv").write_text("cake,5,2.50\n", encoding="utf-8")
    out = Recorder()
    inputs = ["1", "2", "2", "Ann", "1", "cake", "2", "5", "3", "3"]
    run(scripted(inputs), out, root)
    assert "Your Order Id Number is: 850" in out.text
    assert (root / "850.csv").exists()


def test_main_reads_stdin(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["--root", str(tmp_path / "shop")]) == 0
    captured = capsys.readouterr()
    assert "2. Game Menu" in captured.out