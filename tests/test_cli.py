"""Terminal client output and exit codes."""

import pytest

import cli_search


def test_matches_are_listed(capsys):
    code = cli_search.main(["basket", "--min-price", "15", "--max-price", "20"])

    out = capsys.readouterr().out
    assert code == 0
    assert "results: " in out
    assert "GAR02" in out
    assert "GAR01" not in out


def test_rejection_exits_non_zero(capsys):
    code = cli_search.main(["--brand-id", "-1"])

    assert code == cli_search.EXIT_REJECTED
    assert "BrandId must not be negative" in capsys.readouterr().out


def test_catalog_file_option(tmp_path, capsys):
    path = tmp_path / "catalog.json"
    path.write_text(
        '[{"id": 5, "name": "Claw hammer", "description": "Steel", "price": 24.5, "sku": "HAM01",'
        ' "imageUrls": [], "brand": {"id": 2, "name": "Stanley", "logoUrl": ""}}]',
        encoding="utf-8",
    )

    code = cli_search.main(["hammer", "--catalog", str(path)])

    assert code == 0
    assert "HAM01" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["basket", "--min-price", "abc"],
        ["basket", "--min-price", "NaN", "--max-price", "20"],
        ["basket", "--min-price", "1", "--max-price", "Infinity"],
    ],
)
def test_bad_price_is_a_usage_error(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_search.main(argv)

    assert excinfo.value.code == 2
    assert "price" in capsys.readouterr().err
