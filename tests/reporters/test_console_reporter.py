# tests/reporters/test_console_reporter.py
"""
Unit tests for the ConsoleReporter class.
"""

from unittest.mock import MagicMock

from nodecounter.models.node import Resources
from nodecounter.models.report import MonthlyAggregate
from nodecounter.reporters.console_reporter import ConsoleReporter


def test_console_reporter_with_data(mocker):
    mock_console_class = mocker.patch("nodecounter.reporters.console_reporter.Console")
    mock_table_class = mocker.patch("nodecounter.reporters.console_reporter.Table")
    mock_console_instance = MagicMock()
    mock_table_instance = MagicMock()
    mock_console_class.return_value = mock_console_instance
    mock_table_class.return_value = mock_table_instance

    data = [
        MonthlyAggregate(year=2022, month=1, node_count=1, farm_count=1),
        MonthlyAggregate(
            year=2022,
            month=2,
            node_count=2,
            farm_count=1,
            total_resources=Resources(cru=4, mru=8, sru=16, hru=32),
        ),
    ]

    ConsoleReporter().report(data)

    assert mock_table_instance.add_column.call_count == 7
    assert mock_table_instance.add_row.call_count == 2
    mock_table_instance.add_row.assert_any_call("2022-2-1", "2", "1", "4", "8", "16", "32")
    mock_console_instance.print.assert_called_once_with(mock_table_instance)


def test_console_reporter_no_data(mocker):
    mock_console_class = mocker.patch("nodecounter.reporters.console_reporter.Console")
    mock_console_instance = MagicMock()
    mock_console_class.return_value = mock_console_instance

    ConsoleReporter().report([])

    mock_console_instance.print.assert_called_once_with("No months to report.", style="yellow")
