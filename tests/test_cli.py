import pytest

from sphereray.cli import main
from sphereray.ppm import encode_ppm
from sphereray.scene import read_scene_file, render_image

SCENE = """VP 1.5 1 1
BG 10 20 30
OBJ_N 1
S 0 0 5 1 255 0 0
"""


@pytest.fixture
def scene_file(tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text(SCENE)
    return path


@pytest.mark.parametrize("args", [["a"], ["a", "b", "1"], ["a", "b", "1", "2", "3"]])
def test_wrong_argument_count(args, capsys):
    assert main(args) == 1
    assert "Error while reading parameters" in capsys.readouterr().err


def test_renders_scene_to_file(scene_file, tmp_path, capsys):
    output = tmp_path / "out.ppm"
    assert main([str(scene_file), str(output), "4", "3"]) == 0
    expected = encode_ppm(render_image(read_scene_file(scene_file), 4, 3), 4, 3)
    assert output.read_bytes() == expected
    out = capsys.readouterr().out
    assert f"Scene: {scene_file}" in out
    assert f"Output: {output}" in out
    assert "Resolution: 4 x 3" in out
    assert out.rstrip().endswith("Execution ended")


def test_output_file_layout(scene_file, tmp_path):
    output = tmp_path / "out.ppm"
    main([str(scene_file), str(output), "4", "3"])
    data = output.read_bytes()
    header = b"P6\n4 3\n255\n"
    assert data.startswith(header)
    assert len(data) == len(header) + 4 * 3 * 3


def test_non_numeric_size_is_zero(scene_file, tmp_path, capsys):
    output = tmp_path / "out.ppm"
    assert main([str(scene_file), str(output), "abc", "3"]) == 0
    assert output.read_bytes() == b"P6\n0 3\n255\n"
    assert "Resolution: 0 x 3" in capsys.readouterr().out


def test_missing_scene_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main([str(missing), str(tmp_path / "out.ppm"), "2", "2"]) == 1
    assert f"Error while opening the scene file: {missing}" in capsys.readouterr().err
    assert not (tmp_path / "out.ppm").exists()


def test_malformed_scene_file(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("VP 1 1\n")
    assert main([str(path), str(tmp_path / "out.ppm"), "2", "2"]) == 1
    assert "Malformed viewport header section" in capsys.readouterr().err


def test_negative_size_fails_to_render(scene_file, tmp_path, capsys):
    assert main([str(scene_file), str(tmp_path / "out.ppm"), "-2", "2"]) == 1
    assert "Error rendering image" in capsys.readouterr().err


def test_unwritable_output(scene_file, tmp_path, capsys):
    output = tmp_path / "nowhere" / "out.ppm"
    assert main([str(scene_file), str(output), "2", "2"]) == 1
    assert "Error saving image" in capsys.readouterr().err


def test_defaults_used_without_arguments(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "Scene: test.txt" in captured.out
    assert "Output: image.ppm" in captured.out
    assert "Resolution: 1920 x 1080" in captured.out
    assert "Error while opening the scene file: test.txt" in captured.err