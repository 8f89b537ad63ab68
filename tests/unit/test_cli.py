"""Unit tests for the command-line interface."""

from unittest.mock import AsyncMock, patch

import pytest

from llm_relay import cli
from llm_relay.models.generation import NormalizedResponse


class TestArgumentParsing:
    """Test the argparse surface."""

    @pytest.mark.parametrize("raw,expected", [
        ('{"type": "eval"}', {"type": "eval"}),
        ("[1, 2]", [1, 2]),
        ('"tag"', "tag"),
        ("null", None),
    ])
    def test_meta_accepts_any_json_value(self, raw, expected):
        args = cli.build_parser().parse_args(["ask", "hi", "--meta", raw])

        assert args.meta == expected

    @pytest.mark.parametrize("raw", ["{bad", "{'single': 1}", ""])
    def test_invalid_meta_is_a_usage_error(self, raw, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.build_parser().parse_args(["ask", "hi", "--meta", raw])

        assert exc_info.value.code == 2
        assert "invalid JSON" in capsys.readouterr().err

    def test_main_rejects_invalid_meta_before_any_call(self):
        with patch("llm_relay.cli.load_dotenv"), \
             patch("llm_relay.cli.RelayClient") as client_cls:
            with pytest.raises(SystemExit) as exc_info:
                cli.main(["ask", "hi", "--meta", "{bad"])

        assert exc_info.value.code == 2
        client_cls.assert_not_called()

    def test_defaults(self):
        args = cli.build_parser().parse_args(["ask", "hi"])

        assert args.provider == "deepseek"
        assert args.meta is None
        assert args.system is None


class TestAsk:
    """Test the ask command."""

    @pytest.mark.asyncio
    async def test_passes_parsed_meta(self, capsys):
        reply = NormalizedResponse(content="{}", meta={"type": "eval"}, provider="openai", model="gpt-4o-mini")
        with patch("llm_relay.cli.RelayClient") as client_cls:
            client_cls.return_value.generate = AsyncMock(return_value=reply)

            code = await cli.ask("hi", "openai", system="Be brief.", meta={"type": "eval"})

        assert code == 0
        client_cls.return_value.generate.assert_awaited_once_with(
            [{"role": "system", "content": "Be brief."}, {"role": "user", "content": "hi"}],
            meta={"type": "eval"},
            provider="openai",
        )
        assert "Response from openai (gpt-4o-mini)" in capsys.readouterr().out
