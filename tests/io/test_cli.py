from cafe_sim.app.cli import main

DAY = """3
09:00 19:00
10
08:48 1 client1
09:41 1 client1
09:48 1 client2
09:52 3 client1
09:54 2 client1 1
10:25 2 client2 2
10:58 1 client3
10:59 2 client3 3
11:30 1 client4
11:35 2 client4 2
11:45 3 client4
12:33 4 client1
12:43 4 client2
15:52 4 client4
"""

EXPECTED = """09:00
08:48 1 client1
08:48 13 NotOpenYet
09:41 1 client1
09:48 1 client2
09:52 3 client1
09:52 13 ICanWaitNoLonger!
09:54 2 client1 1
10:25 2 client2 2
10:58 1 client3
10:59 2 client3 3
11:30 1 client4
11:35 2 client4 2
11:35 13 PlaceIsBusy
11:45 3 client4
12:33 4 client1
12:33 12 client4 1
12:43 4 client2
15:52 4 client4
19:00 11 client3
19:00
1 70 05:58
2 30 02:18
3 90 08:01
"""


def _write(tmp_path, text):
    p = tmp_path / "day.txt"
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_full_day(tmp_path, capsys):
    assert main([_write(tmp_path, DAY)]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_malformed_line_is_printed(tmp_path, capsys):
    path = _write(tmp_path, "1\n09:00 19:00\n10\n10:00 1 client1\n10:05 2 client1\n")
    assert main([path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "10:05 2 client1\n"


def test_out_of_order_event_is_printed_and_nothing_runs(tmp_path, capsys):
    path = _write(tmp_path, "1\n09:00 19:00\n10\n10:00 1 a\n09:30 1 b\n10:30 1 c\n")
    assert main([path]) == 1
    assert capsys.readouterr().out == "09:30 1 b\n"


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Cannot open file" in captured.err


def test_logs_go_to_stderr(tmp_path, capsys):
    assert main([_write(tmp_path, DAY), "--log-level", "INFO", "--run-id", "cli-1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == EXPECTED


def test_bad_header_goes_to_stderr(tmp_path, capsys):
    assert main([_write(tmp_path, "0\n09:00 19:00\n10\n")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "0\n"
