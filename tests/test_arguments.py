from __future__ import annotations

from cli.arguments import parse_invocation, split_tokens
from cli.feature_chat import FEATURE_FLAGS
from cli.init_repo import REPO_FLAGS
from core.domain.models import FeatureChatParams, RepoChatParams


def test_flags_consume_following_token_and_rest_is_prompt():
    params = parse_invocation(
        ["--project-id", "proj_abc", "Add", "a", "settings", "page"],
        FEATURE_FLAGS,
        FeatureChatParams,
    )

    assert params.project_id == "proj_abc"
    assert params.system is None
    assert params.prompt == "Add a settings page"


def test_prompt_tokens_are_joined_in_order_around_flags():
    params = parse_invocation(
        ["Design", "--repo", "https://github.com/u/r", "a", "--branch", "dev", "dashboard"],
        REPO_FLAGS,
        RepoChatParams,
    )

    assert params.repo == "https://github.com/u/r"
    assert params.branch == "dev"
    assert params.project_id is None
    assert params.prompt == "Design a dashboard"


def test_unknown_flags_become_part_of_the_prompt():
    params = parse_invocation(
        ["--project-id", "p1", "--verbose", "make", "it", "pop"],
        FEATURE_FLAGS,
        FeatureChatParams,
    )

    assert params.prompt == "--verbose make it pop"


def test_trailing_flag_without_value_is_prompt_text():
    values, prompt = split_tokens(["build", "--project-id"], FEATURE_FLAGS)

    assert values == {}
    assert prompt == "build --project-id"


def test_repeated_flag_last_value_wins():
    params = parse_invocation(
        ["--project-id", "first", "--project-id", "second", "go"],
        FEATURE_FLAGS,
        FeatureChatParams,
    )

    assert params.project_id == "second"


def test_no_tokens_yields_empty_record():
    params = parse_invocation([], REPO_FLAGS, RepoChatParams)

    assert params == RepoChatParams()
    assert params.prompt is None


def test_flag_value_may_look_like_a_flag():
    params = parse_invocation(["--system", "--project-id", "x"], FEATURE_FLAGS, FeatureChatParams)

    assert params.system == "--project-id"
    assert params.project_id is None
    assert params.prompt == "x"
