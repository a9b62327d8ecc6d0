import httpx
import openai
import pytest

from slack_summarizer import __version__
from slack_summarizer.llm.prompts import QUESTION_MARKER
from slack_summarizer.schemas.intent import HelpIntent, QuestionIntent, SummarizeIntent, VersionIntent
from helpers import run, slack_message


@pytest.fixture
def channel_with_three_messages(slack_web):
    slack_web.conversations_history.return_value = {
        "ok": True,
        "messages": [
            slack_message("UA", "we should ship friday"),
            slack_message("UB", "agreed, <@UA> owns it"),
            slack_message("UA", "ok"),
        ],
    }
    return slack_web


def posted_texts(slack_web):
    return [c.kwargs["text"] for c in slack_web.chat_postMessage.await_args_list]


@pytest.mark.parametrize("text", ["<@UBOT> --help", "<@UBOT> --version"])
def test_help_and_version_never_fetch(dispatcher, slack_web, openai_client, text):
    """
    WHY: Flags answer immediately without reading history or calling the model.
    EXPECTED: One post, no history/replies/model calls.
    """
    run(dispatcher.handle_mention({"channel": "C1", "text": text}))

    slack_web.conversations_history.assert_not_awaited()
    slack_web.conversations_replies.assert_not_awaited()
    openai_client.chat.completions.create.assert_not_awaited()
    assert slack_web.chat_postMessage.await_count == 1


def test_version_reply(dispatcher, slack_web):
    text = run(dispatcher.dispatch(VersionIntent(), "C1", "5.5"))
    assert text == f"v{__version__}" == "v1.0.0"
    assert slack_web.chat_postMessage.await_args.kwargs["thread_ts"] == "5.5"


def test_help_reply(dispatcher, slack_web):
    text = run(dispatcher.dispatch(HelpIntent(), "C1"))
    assert "--limit" in text
    assert posted_texts(slack_web) == [text]


def test_mention_summarize_scenario(dispatcher, channel_with_three_messages, openai_client):
    """
    WHY: End-to-end `@bot summarize` in a thread-less channel with 3 messages from alice and bob.
    EXPECTED:
        1. Model called once with system + 3 entries, names resolved, mentions rewritten.
        2. One post with the model output as a new top-level message.
    """
    slack_web = channel_with_three_messages
    event = {"channel": "C1", "text": "<@UBOT> summarize"}
    run(dispatcher.handle_mention(event))

    slack_web.conversations_history.assert_awaited_once_with(channel="C1", limit=10)
    openai_client.chat.completions.create.assert_awaited_once()
    messages = openai_client.chat.completions.create.await_args.kwargs["messages"]
    assert len(messages) == 4
    assert messages[0]["role"] == "system"
    assert [m["content"] for m in messages[1:]] == [
        "alice: we should ship friday",
        "bob: agreed, alice owns it",
        "alice: ok",
    ]

    slack_web.chat_postMessage.assert_awaited_once()
    kwargs = slack_web.chat_postMessage.await_args.kwargs
    assert kwargs["text"] == "A summary."
    assert kwargs["channel"] == "C1"
    assert "thread_ts" not in kwargs


def test_pattern_question_scenario(dispatcher, channel_with_three_messages, openai_client):
    """
    WHY: `!summarize "what was decided?" 5` asks a question over the last 5 messages.
    EXPECTED: fetch limit 5; last prompt entry is marker + question.
    """
    slack_web = channel_with_three_messages
    run(dispatcher.handle_pattern_message({"channel": "C1", "text": '!summarize "what was decided?" 5'}))

    slack_web.conversations_history.assert_awaited_once_with(channel="C1", limit=5)
    messages = openai_client.chat.completions.create.await_args.kwargs["messages"]
    assert messages[-1] == {"role": "user", "content": f"{QUESTION_MARKER}what was decided?"}
    assert len(messages) == 5


def test_mention_limit_only(dispatcher, channel_with_three_messages):
    run(dispatcher.handle_mention({"channel": "C1", "text": "<@UBOT> --limit 20"}))
    channel_with_three_messages.conversations_history.assert_awaited_once_with(channel="C1", limit=20)


def test_thread_trigger_reads_thread(dispatcher, slack_web):
    slack_web.conversations_replies.return_value = {"ok": True, "messages": [slack_message("UA", "thread msg")]}
    run(dispatcher.handle_pattern_message({"channel": "C1", "text": "!summarize", "thread_ts": "42.0"}))

    slack_web.conversations_replies.assert_awaited_once_with(channel="C1", ts="42.0", limit=10)
    assert slack_web.chat_postMessage.await_args.kwargs["thread_ts"] == "42.0"


def test_empty_fetch_posts_nothing(dispatcher, slack_web, openai_client):
    """
    WHY: Nothing to summarize means no reply at all (no "no messages" notice).
    EXPECTED: No model call, no post, dispatch returns None.
    """
    result = run(dispatcher.dispatch(SummarizeIntent(limit=10), "C1"))
    assert result is None
    openai_client.chat.completions.create.assert_not_awaited()
    slack_web.chat_postMessage.assert_not_awaited()


def test_fetch_failure_posts_nothing(dispatcher, slack_web):
    slack_web.conversations_history.side_effect = ConnectionError("down")
    assert run(dispatcher.dispatch(SummarizeIntent(limit=10), "C1")) is None
    slack_web.chat_postMessage.assert_not_awaited()


def test_model_failure_posts_fallback_once(dispatcher, channel_with_three_messages, openai_client):
    """
    WHY: Model failures degrade to a fixed string; the user still gets exactly one reply.
    EXPECTED: One post with "Error summarizing text."
    """
    openai_client.chat.completions.create.side_effect = openai.APITimeoutError(
        request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    )
    run(dispatcher.dispatch(QuestionIntent(text="why?", limit=10), "C1"))
    assert posted_texts(channel_with_three_messages) == ["Error summarizing text."]


def test_user_lookup_failure_degrades(dispatcher, slack_web, openai_client):
    slack_web.conversations_history.return_value = {"ok": True, "messages": [slack_message("UGHOST", "boo")]}
    run(dispatcher.dispatch(SummarizeIntent(limit=10), "C1"))
    messages = openai_client.chat.completions.create.await_args.kwargs["messages"]
    assert messages[1]["content"] == "Unknown: boo"
    assert slack_web.chat_postMessage.await_count == 1


def test_commands_and_bot_posts_filtered(dispatcher, slack_web, openai_client):
    slack_web.conversations_history.return_value = {
        "ok": True,
        "messages": [
            slack_message("UA", "!summarize 3"),
            slack_message("UBOT", "previous summary"),
            slack_message("UB", "<@UBOT> summarize"),
            slack_message("UB", "real talk"),
        ],
    }
    run(dispatcher.dispatch(SummarizeIntent(limit=10), "C1"))
    messages = openai_client.chat.completions.create.await_args.kwargs["messages"]
    assert [m["content"] for m in messages[1:]] == ["bob: real talk"]


def test_post_failure_does_not_raise(dispatcher, channel_with_three_messages):
    from slack_sdk.errors import SlackApiError

    channel_with_three_messages.chat_postMessage.side_effect = SlackApiError(
        "not_in_channel", {"ok": False, "error": "not_in_channel"}
    )
    assert run(dispatcher.dispatch(SummarizeIntent(limit=10), "C1")) == "A summary."
    assert channel_with_three_messages.chat_postMessage.await_count == 1


def test_bot_events_ignored(dispatcher, slack_web):
    result = run(dispatcher.handle_pattern_message({"channel": "C1", "text": "!summarize", "bot_id": "B1"}))
    assert result is None
    slack_web.conversations_history.assert_not_awaited()


def test_trigger_author_is_logged(dispatcher, caplog):
    with caplog.at_level("INFO", logger="dispatcher"):
        run(dispatcher.handle_mention({"channel": "C1", "user": "UA", "text": "<@UBOT> --version"}))
    assert "Mention from UA in C1" in caplog.text
