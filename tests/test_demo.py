import pytest

from gf2_sparse import SparseMatrix, multiply, random_sparse_matrix
from gf2_sparse.demo import main, parity_pair, report_weights


def test_parity_pair_n4():
    P = SparseMatrix(4, 4, [(0, 1), (2, 3)])
    H, GT = parity_pair(P)
    assert H.shape == (4, 8)
    assert GT.shape == (8, 4)
    assert set(H) == {(1, 0), (3, 2), (0, 4), (1, 5), (2, 6), (3, 7)}
    assert set(GT) == {(0, 0), (1, 1), (2, 2), (3, 3), (5, 0), (7, 2)}
    assert multiply(H, GT).hamming_weight() == 0


def test_parity_product_vanishes(fx_rng):
    P = random_sparse_matrix(40, 40, 60, rng=fx_rng)
    H, GT = parity_pair(P)
    assert multiply(H, GT).ones == []


def test_report_weights(capsys):
    report_weights("P", SparseMatrix(2, 3, [(0, 0), (0, 2)]))
    out = capsys.readouterr().out
    assert "HammingWeight of P = 2" in out
    assert "HammingWeightsOfRows of P = 0 2" in out
    assert "HammingWeightsOfCols of P = 0 1" in out


def test_main_writes_images(tmp_path, capsys):
    assert main(["--size", "20", "--seed", "3", "--output-dir", str(tmp_path)]) == 0
    for name in ("H.png", "GT.png", "A.png", "B.png"):
        assert (tmp_path / name).exists()
    out = capsys.readouterr().out
    assert "[product] HammingWeight of H*GT = 0" in out
    assert "[inverse] A*B is identity = True" in out


def test_main_without_images(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["-N", "12", "--seed", "1", "--no-images", "--skip-inverse"]) == 0
    assert list(tmp_path.iterdir()) == []


def test_main_rejects_bad_size():
    with pytest.raises(SystemExit):
        main(["--size", "0"])


def test_main_rejects_negative_ones():
    with pytest.raises(SystemExit):
        main(["--size", "5", "--ones", "-1", "--no-images", "--skip-inverse"])
