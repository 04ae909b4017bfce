# tests/cli/test_command_line.py
import pandas as pd
import pytest
import matplotlib
matplotlib.use("Agg")

from pathology.main import EXIT_MAP_ERROR, main


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("3 2\nRMR\nRRR\n")
    return str(path)


def test_uniform_cost_run(map_file, capsys):
    assert main([map_file, "0", "0", "2", "0", "-l"]) == 0
    out = capsys.readouterr().out
    assert "R   M   R" in out
    assert "Visited states: 5" in out
    assert "Path cost: 4" in out
    assert "Path size: 5" in out
    assert "Time: " in out


@pytest.mark.parametrize("flag", ["-b", "-l", "-i", "-ia", "-a1", "-a2"])
def test_every_flag_solves(map_file, flag, capsys):
    assert main([map_file, "0", "0", "2", "0", flag]) == 0
    assert "Path size:" in capsys.readouterr().out


def test_trailing_weight_and_metrics(map_file, tmp_path, capsys):
    metrics = tmp_path / "metrics.csv"
    code = main([map_file, "0", "0", "2", "0", "-a2", "1.5",
                 "--quiet", "--metrics", "--metrics-file", str(metrics)])
    assert code == 0
    assert capsys.readouterr().out == ""
    df = pd.read_csv(metrics)
    assert df.iloc[0]["Algorithm"] == "A* - Cost + Weighted Distance"
    assert df.iloc[0]["Algorithm Weight"] == 1.5


def test_unweighted_metrics_record_zero_weight(map_file, tmp_path):
    metrics = tmp_path / "metrics.csv"
    main([map_file, "0", "0", "2", "0", "-b", "--quiet", "--metrics", "--metrics-file", str(metrics)])
    df = pd.read_csv(metrics)
    assert df.iloc[0]["Algorithm"] == "Breadth"
    assert df.iloc[0]["Algorithm Weight"] == 0.0


def test_no_path(tmp_path, capsys):
    path = tmp_path / "walled.txt"
    path.write_text("3 1\nRWR\n")
    assert main([str(path), "0", "0", "2", "0", "-a1"]) == 0
    assert "No path found!" in capsys.readouterr().out


def test_map_format_error(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("3 2\nRRR\n")
    assert main([str(path), "0", "0", "1", "0", "-b"]) == EXIT_MAP_ERROR
    assert "Declared columns of size 2 but got 1" in capsys.readouterr().err


def test_missing_map_file(tmp_path):
    assert main([str(tmp_path / "nope.txt"), "0", "0", "1", "0", "-b"]) == EXIT_MAP_ERROR


@pytest.mark.parametrize("argv", [
    ["0", "0", "2", "0", "-b"],                   # 缺少地图参数
    ["MAP", "0", "0", "2", "0"],                  # 缺少算法开关
    ["MAP", "x", "0", "2", "0", "-b"],            # 坐标不是整数
    ["MAP", "0", "0", "2", "0", "-b", "-l"],      # 算法开关互斥
    ["MAP", "0", "0", "2", "0", "-l", "3.0"],     # 权重只对 -a2 有效
    ["MAP", "0", "0", "2", "0", "-a2", "-1"],     # 负权重
    ["MAP", "0", "0", "9", "0", "-b"],            # 终点越界
])
def test_usage_errors(map_file, argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main([map_file if a == "MAP" else a for a in argv])
    assert exc.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_plot_and_debug_log(map_file, tmp_path):
    png = tmp_path / "search.png"
    log_dir = tmp_path / "debug"
    assert main([map_file, "0", "0", "2", "0", "-a1", "--quiet",
                 "--plot", str(png), "--debug-log", str(log_dir)]) == 0
    assert png.exists()
    assert any(log_dir.iterdir())
