"""Tests for rich rendering"""

from aws_network_tables.core import BaseDisplay
from aws_network_tables.tables import all_tables, get_table

TABLE = "aws_ec2_transit_gateway_vpc_attachment"


def _row(**overrides):
    row = {name: None for name in get_table(TABLE).column_names}
    row.update(
        transit_gateway_attachment_id="tgw-attach-0123",
        state="available",
        tags={"Name": "prod-vpc"},
        title="prod-vpc",
    )
    row.update(overrides)
    return row


class TestBaseDisplay:
    def test_show_tables(self, mock_console):
        BaseDisplay(mock_console).show_tables(all_tables())
        assert TABLE in mock_console._output.getvalue()

    def test_show_columns(self, mock_console):
        BaseDisplay(mock_console).show_columns(get_table(TABLE))
        output = mock_console._output.getvalue()
        assert "association_state" in output
        assert "timestamp" in output

    def test_show_rows(self, mock_console):
        BaseDisplay(mock_console).show_rows(
            get_table(TABLE), [_row()], ["transit_gateway_attachment_id", "title"]
        )
        output = mock_console._output.getvalue()
        assert "tgw-attach-0123" in output
        assert "prod-vpc" in output
        assert "Total: 1 row(s)" in output

    def test_show_rows_json_cell(self, mock_console):
        BaseDisplay(mock_console).show_rows(get_table(TABLE), [_row()], ["tags"])
        assert '{"Name":"prod-vpc"}' in mock_console._output.getvalue()

    def test_show_rows_empty(self, mock_console):
        BaseDisplay(mock_console).show_rows(get_table(TABLE), [])
        assert "No rows returned" in mock_console._output.getvalue()
