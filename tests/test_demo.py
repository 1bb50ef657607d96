"""Tests for the demo command line."""

import pytest
import structlog

from checkout_discounts.config import Settings
from checkout_discounts.demo import SECTIONS, build_parser, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("CHECKOUT_TAX_RATE", "CHECKOUT_LOG_LEVEL", "CHECKOUT_CUSTOMER"):
        monkeypatch.delenv(var, raising=False)
    yield monkeypatch
    structlog.reset_defaults()


def line_starting(output: str, prefix: str) -> str:
    for line in output.splitlines():
        if line.startswith(prefix):
            return line
    raise AssertionError(f"no line starting with {prefix!r}")


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.sections == []
    assert args.tax_rate is None
    assert args.log_level is None


def test_runs_every_section_by_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    for title in (
        "1. RULE SWITCHING",
        "2. SCENARIOS",
        "3. BUY ONE GET ONE",
        "4. MINIMUM PURCHASE REQUIREMENTS",
        "5. STOREFRONT CATALOG",
    ):
        assert title in out


def test_single_section(capsys):
    assert main(["bogo"]) == 0
    out = capsys.readouterr().out
    assert "3. BUY ONE GET ONE" in out
    assert "1. RULE SWITCHING" not in out
    assert "$49.99" in line_starting(out, "Buy One Get One Free (Electronics)")
    assert "$0.00" in line_starting(out, "Buy One Get One Free (Books)")


def test_scenarios_clamp_fixed_discount(capsys):
    assert main(["scenarios"]) == 0
    row = line_starting(capsys.readouterr().out, "Fixed Discount > Order Total")
    assert row.split("Total:")[1].strip() == "$0.00"


def test_minimums_report_qualification(capsys):
    assert main(["minimums"]) == 0
    out = capsys.readouterr().out
    assert "Qualifies: True" in line_starting(out, "15% Off (Min $500.00)")
    assert "Qualifies: False" in line_starting(out, "20% Off (Min $800.00)")


def test_catalog_checks_out_with_best_rule(capsys, clean_env):
    clean_env.setenv("CHECKOUT_CUSTOMER", "Jordan Lee")
    assert main(["catalog", "--tax-rate", "5"]) == 0
    out = capsys.readouterr().out
    assert "Customer: Jordan Lee" in out
    assert "Rule: 20% Off (Min $100.00)" in out
    assert "Tax (5%): $60.96" in out
    assert "Total: $1280.06" in out


def test_tax_rate_from_environment(capsys, clean_env):
    clean_env.setenv("CHECKOUT_TAX_RATE", "10")
    assert main(["switching"]) == 0
    assert "With 10% tax:" in capsys.readouterr().out


def test_unknown_section_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["everything"])
    assert exc.value.code == 2
    assert "unknown section(s): everything" in capsys.readouterr().err


def test_negative_tax_rate_rejected(capsys):
    assert main(["catalog", "--tax-rate", "-3"]) == 2
    assert "Tax rate cannot be negative" in capsys.readouterr().err


def test_malformed_env_tax_rate(capsys, clean_env):
    clean_env.setenv("CHECKOUT_TAX_RATE", "lots")
    assert main([]) == 2
    assert "Tax rate must be a number" in capsys.readouterr().err


def test_logs_go_to_stderr(capsys):
    assert main(["bogo", "--log-level", "info"]) == 0
    captured = capsys.readouterr()
    assert '"event": "rule_changed"' in captured.err
    assert "rule_changed" not in captured.out


def test_section_names():
    assert list(SECTIONS) == ["switching", "scenarios", "bogo", "minimums", "catalog"]


@pytest.mark.parametrize("section", ["scenarios", "bogo", "minimums"])
def test_sections_without_checkout_ignore_tax_rate(capsys, section):
    SECTIONS[section](Settings())
    untaxed = capsys.readouterr().out
    SECTIONS[section](Settings(tax_rate=8.5, customer="Jordan Lee"))
    assert capsys.readouterr().out == untaxed


def test_nan_tax_rate_rejected(capsys):
    assert main(["catalog", "--tax-rate", "nan"]) == 2
    assert "Tax rate cannot be negative" in capsys.readouterr().err
