"""Tests for the APK filename parser and release records."""

from __future__ import annotations

from datetime import date

import pytest

from apk_index.release import (
    Channel,
    ReleaseRecord,
    parse_apk_filename,
    parse_apk_filenames,
)


class TestParseApkFilename:
    def test_dev_filename(self) -> None:
        name = "app_dev_20251010_c101_v1.1.70_release.apk"
        record = parse_apk_filename(name, "app")
        assert record == ReleaseRecord(
            channel=Channel.DEV,
            date="20251010",
            build=101,
            version="1.1.70",
            filename=name,
        )

    def test_stg_filename(self) -> None:
        record = parse_apk_filename("app_stg_20240102_c7_v2.0.0_release.apk", "app")
        assert record is not None
        assert record.channel is Channel.STG
        assert record.build == 7
        assert record.version == "2.0.0"

    def test_build_zero_and_leading_zeros(self) -> None:
        record = parse_apk_filename("app_dev_20250101_c007_v0.0.0_release.apk", "app")
        assert record is not None
        assert record.build == 7

    @pytest.mark.parametrize(
        "name",
        [
            "app_dev_20251010_c101_v1.1.70_release.aab",
            "app_dev_20251010_c101_v1.1.70_debug.apk",
            "app_prod_20251010_c101_v1.1.70_release.apk",
            "app_dev_2025101_c101_v1.1.70_release.apk",
            "app_dev_2025-10-10_c101_v1.1.70_release.apk",
            "app_dev_20251010_cXYZ_v1.1.70_release.apk",
            "app_dev_20251010_101_v1.1.70_release.apk",
            "app_dev_20251010_c101_v1.1_release.apk",
            "app_dev_20251010_c101_v1.1.x_release.apk",
            "app_dev_20251010_c101_v1.1.70.1_release.apk",
            "app_dev_20251010_c101_1.1.70_release.apk",
            "other_dev_20251010_c101_v1.1.70_release.apk",
            "xapp_dev_20251010_c101_v1.1.70_release.apk",
            "app_dev_20251010_c101_v1.1.70_release.apk.bak",
            "app_dev_20251010_c101_v1.1.70_release.apk\n",
            "app_dev_２０２５１０１０_c101_v1.1.70_release.apk",
            "",
        ],
    )
    def test_non_matching_names(self, name: str) -> None:
        assert parse_apk_filename(name, "app") is None

    def test_prefix_is_matched_literally(self) -> None:
        name = "my.app_dev_20251010_c1_v1.0.0_release.apk"
        assert parse_apk_filename(name, "my.app") is not None
        assert parse_apk_filename("myXapp_dev_20251010_c1_v1.0.0_release.apk", "my.app") is None

    def test_prefixes_do_not_leak_between_calls(self) -> None:
        first = "alpha_dev_20251010_c1_v1.0.0_release.apk"
        second = "beta_dev_20251010_c1_v1.0.0_release.apk"
        assert parse_apk_filename(first, "alpha") is not None
        assert parse_apk_filename(second, "beta") is not None
        assert parse_apk_filename(first, "beta") is None


class TestParseApkFilenames:
    def test_skips_non_matching(self) -> None:
        names = [
            "app_dev_20251010_c101_v1.1.70_release.apk",
            "notes.apk",
            "app_stg_20251009_c100_v1.1.69_release.apk",
        ]
        records = parse_apk_filenames(names, "app")
        assert [r.filename for r in records] == [names[0], names[2]]

    def test_empty_input(self) -> None:
        assert parse_apk_filenames([], "app") == []


class TestReleaseRecord:
    @pytest.fixture
    def record(self) -> ReleaseRecord:
        return ReleaseRecord(
            channel=Channel.DEV,
            date="20251009",
            build=100,
            version="1.1.69",
            filename="app_dev_20251009_c100_v1.1.69_release.apk",
        )

    def test_labels(self, record: ReleaseRecord) -> None:
        assert record.version_label == "v1.1.69"
        assert record.build_label == "c100"
        assert record.date_label == "2025-10-09"
        assert record.release_date == date(2025, 10, 9)

    def test_href(self, record: ReleaseRecord) -> None:
        assert record.href() == "./download/app_dev_20251009_c100_v1.1.69_release.apk"
        assert record.href("/files/") == "/files/app_dev_20251009_c100_v1.1.69_release.apk"

    def test_is_immutable(self, record: ReleaseRecord) -> None:
        with pytest.raises(AttributeError):
            record.build = 1  # type: ignore[misc]
