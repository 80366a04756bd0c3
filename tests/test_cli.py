"""Tests for the convexsect command line interface."""

from pathlib import Path

import pytest
import yaml

from convexsect.__main__ import main


def test_demo_to_stdout(capsys):
    assert main(['demo', 'triangles']) == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data['name'] == 'triangles'
    assert [s['kind'] for s in data['shapes']] == ['isosceles'] * 3


def test_demo_then_check(tmp_path: Path, capsys):
    path = tmp_path / 'rects.yaml'
    assert main(['demo', 'rectangles', '--out', str(path)]) == 0
    assert path.exists()
    capsys.readouterr()

    assert main(['check', str(path)]) == 0
    out = capsys.readouterr().out
    assert 'intersect:' not in out
    assert '0: rectangle black' in out
    assert '2: rectangle black' in out


def test_check_reports_hits(tmp_path: Path, capsys):
    path = tmp_path / 'mixed.yaml'
    main(['demo', 'mixed', '-o', str(path)])
    capsys.readouterr()
    assert main(['check', str(path)]) == 0
    out = capsys.readouterr().out
    assert 'intersect: 0 rectangle <-> 2 circle' in out
    assert 'intersect: 1 isosceles <-> 2 circle' in out
    assert '3: circle black' in out


def test_check_missing_file(tmp_path: Path, capsys):
    assert main(['check', str(tmp_path / 'nope.yaml')]) == 1
    assert 'Error:' in capsys.readouterr().err


def test_check_bad_scene(tmp_path: Path, capsys):
    path = tmp_path / 'bad.yaml'
    path.write_text('shapes:\n  - kind: hexagon\n')
    assert main(['check', str(path)]) == 1
    assert 'hexagon' in capsys.readouterr().err


def test_unknown_demo_is_usage_error():
    with pytest.raises(SystemExit):
        main(['demo', 'robots'])


def test_export(tmp_path: Path, capsys):
    pytest.importorskip('ezdxf')
    path = tmp_path / 'mixed.yaml'
    main(['demo', 'mixed', '-o', str(path)])
    out = tmp_path / 'mixed.dxf'
    assert main(['export', str(path), str(out)]) == 0
    assert out.exists()
    assert f'wrote {out}' in capsys.readouterr().out
