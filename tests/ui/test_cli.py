from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from nftcatalog.ui import cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    # keep the root logger untouched between tests
    monkeypatch.setattr(cli, "configure_logging", lambda **_: None)


def _run(catalog_path: Path, *args: str) -> None:
    cli.main(["--catalog", str(catalog_path), *args])


def test_query_by_genre_prints_matching_listing(
    catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _run(catalog_path, "query", "--artist", "djarafat", "--genre", "Pop")

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["NFT 2\tPop\tVideo\t1.2 ETH\tunavailable"]


def test_query_with_malformed_max_price_lists_everything(
    catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _run(catalog_path, "query", "--max-price", "cheap")

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    assert lines[0] == "NFT 1\tHip-Hop\tAudio\t0.5 ETH\tavailable: 10"


def test_query_without_matches(catalog_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(catalog_path, "query", "--genre", "Zouglou")

    assert capsys.readouterr().out.strip() == "No listings match."


def test_partition_prints_both_groups(
    catalog_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _run(catalog_path, "partition", "Josey")

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Active:"
    assert lines[1].startswith("Nouveaux Sons\t")
    assert lines[3] == "Sold:"
    assert lines[4] == "Premier Album\t-\tAudio\t2.0 ETH\tsold for 2.0 ETH"


def test_artists_search(catalog_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(catalog_path, "artists", "--search", "di")

    assert capsys.readouterr().out.splitlines() == ["didib\tDidi B\t0 listing(s)"]


def test_facets(catalog_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(catalog_path, "facets")

    assert capsys.readouterr().out.splitlines() == [
        "genres: Hip-Hop, Pop, Rock",
        "media types: Audio, Video",
    ]


def test_unknown_artist_exits_with_not_found(catalog_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(catalog_path, "artist", "kerozen")

    assert excinfo.value.code == cli.EXIT_NOT_FOUND


def test_missing_catalog_exits_with_load_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(tmp_path / "missing.json", "artists")

    assert excinfo.value.code == cli.EXIT_LOAD


def test_missing_configuration_exits_with_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NFTCATALOG_CATALOG_PATH", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["artists"])

    assert excinfo.value.code == cli.EXIT_USAGE
