"""End-to-end tests for the tool handlers, from arguments to the URL handed to the OS."""

import pytest
from fastmcp.exceptions import ToolError

from things_mcp.api import api_state, call_api
from things_mcp.api.models import BatchTodoItem, DateRange, SearchFilter, TemplateTodo, TodoUpdateFields
from things_mcp.domain.templates import DEFAULT_CUSTOM_TODOS, PROJECT_TEMPLATES
from things_mcp.services import ServiceContext

from .helpers import TOKEN, command_of, make_settings, query_params


class TestShowTools:
    def test_show_list_opens_without_token(self, install_context, opener):
        install_context(make_settings(auth_token=None))
        message = call_api("show_list", list_id="Today")
        assert opener.last == "things:///show?id=today"
        assert message == "Successfully opened Things app and navigated to Today"

    def test_invalid_list_opens_nothing(self, context, opener):
        with pytest.raises(ToolError, match="Invalid list ID"):
            call_api("show_list", list_id="everything")
        assert opener.urls == []

    @pytest.mark.parametrize(
        "tool, list_id",
        [
            ("show_today_list", "today"),
            ("show_inbox", "inbox"),
            ("show_upcoming", "upcoming"),
            ("show_anytime", "anytime"),
            ("show_someday", "someday"),
            ("show_projects", "projects"),
            ("show_areas", "areas"),
            ("show_logbook", "logbook"),
        ],
    )
    def test_fixed_list_tools(self, context, opener, tool, list_id):
        call_api(tool)
        assert opener.last == f"things:///show?id={list_id}"

    def test_wrong_platform(self, monkeypatch, opener):
        api_state.reset()
        monkeypatch.setattr(
            "things_mcp.api.state.ServiceContext",
            lambda: ServiceContext(make_settings(platform="linux"), opener=opener),
        )
        try:
            with pytest.raises(ToolError, match="only available on macOS"):
                call_api("show_inbox")
        finally:
            api_state.reset()
        assert opener.urls == []


class TestAddTools:
    def test_title_with_spaces(self, context, opener):
        message = call_api("add_todo", title="Temp Add From MCP")
        assert message == 'Successfully created to-do: "Temp Add From MCP"'
        assert opener.last == f"things:///add?auth-token={TOKEN}&title=Temp%20Add%20From%20MCP"
        assert "+" not in opener.last
        assert set(query_params(opener.last)) == {"auth-token", "title"}

    def test_all_fields(self, context, opener):
        call_api(
            "add_todo",
            title="Pack",
            notes="Bring charger",
            when="Evening",
            deadline="2024-06-01",
            tags="travel",
            checklist="Socks\nShirts",
            list="Trip",
        )
        params = query_params(opener.last)
        assert params["when"] == "evening"
        assert params["checklist-items"] == "Socks\nShirts"
        assert params["list"] == "Trip"

    def test_requires_token(self, install_context, opener):
        install_context(make_settings(auth_token=None))
        with pytest.raises(ToolError, match="THINGS_AUTHENTICATION_TOKEN"):
            call_api("add_todo", title="Milk")
        assert opener.urls == []

    def test_blank_title(self, context, opener):
        with pytest.raises(ToolError, match="Todo title is required"):
            call_api("add_todo", title="   ")
        assert opener.urls == []

    def test_invalid_when(self, context):
        with pytest.raises(ToolError, match="'when' must be one of"):
            call_api("add_todo", title="Milk", when="next week")

    def test_project_with_todos(self, context, opener):
        message = call_api(
            "add_project",
            title="Website Redesign",
            notes="Complete overhaul of company website",
            area="Work",
            todos=["Create wireframes", "Design mockups", "  "],
        )
        assert message == 'Successfully created project: "Website Redesign" with 2 initial to-do(s)'
        assert command_of(opener.last) == "add-project"
        params = query_params(opener.last)
        assert params["title"] == "Website Redesign"
        assert params["area"] == "Work"
        assert params["to-dos"] == "Create wireframes\nDesign mockups"


class TestUpdateTools:
    def test_omitted_fields_are_not_sent(self, context, opener):
        message = call_api("update_todo", id="abc", title="Renamed")
        assert message == 'Successfully updated to-do with ID: "abc"'
        assert query_params(opener.last) == {"auth-token": TOKEN, "id": "abc", "title": "Renamed"}

    def test_empty_notes_clear_the_field(self, context, opener):
        call_api("update_todo", id="abc", notes="")
        assert opener.last == f"things:///update?auth-token={TOKEN}&id=abc&notes="

    def test_missing_id(self, context, opener):
        with pytest.raises(ToolError, match="Todo ID is required"):
            call_api("update_todo", id="", title="x")
        assert opener.urls == []

    def test_title_length_is_limited(self, context, opener):
        with pytest.raises(ToolError, match="title is too long"):
            call_api("update_todo", id="abc", title="x" * 4001)
        with pytest.raises(ToolError, match="title is too long"):
            call_api("update_project", id="p1", title="x" * 4001)
        assert opener.urls == []

    def test_update_project(self, context, opener):
        call_api("update_project", id="p1", tags="")
        assert command_of(opener.last) == "update-project"
        assert query_params(opener.last)["tags"] == ""

    def test_complete(self, context, opener):
        message = call_api("complete_todo", id="abc")
        assert message == 'Successfully marked to-do as completed: "abc"'
        assert opener.last == f"things:///update?auth-token={TOKEN}&id=abc&completed=true"


class TestSearchTools:
    def test_search_without_token(self, install_context, opener):
        install_context(make_settings(auth_token=None))
        call_api("search", query="weekly report")
        assert opener.last == "things:///search?query=weekly%20report"

    def test_advanced_filters(self, context, opener):
        message = call_api(
            "search_advanced",
            query="report",
            filter=SearchFilter(status="Open", tag="work", date_range=DateRange(start="2024-01-01")),
            limit=10,
        )
        params = query_params(opener.last)
        assert params["status"] == "open"
        assert params["tag"] == "work"
        assert params["start_date"] == "2024-01-01"
        assert params["limit"] == "10"
        assert "end_date" not in params
        assert message == (
            'Successfully executed advanced search for: "report"\n'
            "Applied filters: status, tag, start_date\n"
            "Result limit: 10"
        )

    def test_filter_as_plain_dict(self, context, opener):
        call_api("search_advanced", query="x", filter={"type": "projects"})
        assert query_params(opener.last)["type"] == "projects"

    @pytest.mark.parametrize("limit", [0, 101])
    def test_limit_out_of_range(self, context, opener, limit):
        with pytest.raises(ToolError, match="limit must be between 1 and 100"):
            call_api("search_advanced", query="x", limit=limit)
        assert opener.urls == []

    def test_bad_status(self, context):
        with pytest.raises(ToolError, match="'status' must be one of"):
            call_api("search_advanced", query="x", filter={"status": "done"})

    def test_unknown_filter_key(self, context):
        with pytest.raises(ToolError, match="Invalid filter"):
            call_api("search_advanced", query="x", filter={"colour": "red"})


class TestBatchTools:
    def test_add_isolates_failures(self, context, opener):
        message = call_api(
            "batch_add_todos",
            todos=[
                BatchTodoItem(title="Buy milk"),
                BatchTodoItem(title=""),
                {"title": "Call mom", "when": "today"},
            ],
        )
        assert len(opener.urls) == 2
        assert message.startswith("Batch add todos completed: 2 successful, 1 failed")
        lines = message.splitlines()
        assert lines[-3] == '✅ Item 1: "Buy milk" - Created successfully'
        assert lines[-2].startswith('❌ Item 2: "Unknown" - Error: Todo title is required')
        assert lines[-1] == '✅ Item 3: "Call mom" - Created successfully'

    def test_add_too_many(self, context, opener):
        with pytest.raises(ToolError, match="maximum of 20 items"):
            call_api("batch_add_todos", todos=[{"title": f"t{i}"} for i in range(21)])
        assert opener.urls == []

    def test_add_requires_token(self, install_context):
        install_context(make_settings(auth_token=None))
        with pytest.raises(ToolError, match="batch add"):
            call_api("batch_add_todos", todos=[{"title": "x"}])

    def test_update_requires_a_field(self, context, opener):
        with pytest.raises(ToolError, match="At least one update field"):
            call_api("batch_update_todos", ids=["a"], updates=TodoUpdateFields())
        assert opener.urls == []

    def test_update_clears_notes_on_every_item(self, context, opener):
        message = call_api("batch_update_todos", ids=["a", "b"], updates={"notes": ""})
        assert [query_params(url)["notes"] for url in opener.urls] == ["", ""]
        assert [query_params(url)["id"] for url in opener.urls] == ["a", "b"]
        assert "Applied Updates: notes: " in message
        assert message.startswith("Batch update todos completed: 2 successful, 0 failed")

    def test_update_with_only_blank_fields_is_rejected(self, context, opener):
        with pytest.raises(ToolError, match="At least one update field"):
            call_api("batch_update_todos", ids=["a", "b"], updates={"title": "  ", "when": ""})
        assert opener.urls == []

    def test_update_summary_lists_cleaned_values(self, context, opener):
        message = call_api("batch_update_todos", ids=["a"], updates={"title": " Renamed ", "list": " "})
        assert "Applied Updates: title: Renamed\n" in message
        assert query_params(opener.last) == {"auth-token": TOKEN, "id": "a", "title": "Renamed"}

    def test_add_reports_malformed_items_individually(self, context, opener):
        message = call_api(
            "batch_add_todos",
            todos=[{"title": "Buy milk"}, {"title": 5}, {"title": "x", "checklist": "a"}, "Call mom", {"title": "Walk"}],
        )
        assert message.startswith("Batch add todos completed: 2 successful, 3 failed")
        assert [query_params(url)["title"] for url in opener.urls] == ["Buy milk", "Walk"]

    def test_complete_reports_non_string_ids(self, context, opener):
        message = call_api("batch_complete_todos", ids=["a", 7, None])
        assert message.startswith("Batch complete todos finished: 1 successful, 2 failed")
        assert len(opener.urls) == 1

    def test_complete_with_blank_id(self, context, opener):
        message = call_api("batch_complete_todos", ids=["a", " ", "c"])
        assert message.startswith("Batch complete todos finished: 2 successful, 1 failed")
        assert [query_params(url)["id"] for url in opener.urls] == ["a", "c"]
        assert all(query_params(url)["completed"] == "true" for url in opener.urls)

    def test_complete_allows_fifty(self, context, opener):
        call_api("batch_complete_todos", ids=[f"id{i}" for i in range(50)])
        assert len(opener.urls) == 50


class TestProjectTemplates:
    def test_builtin_template(self, context, opener):
        message = call_api("create_project_template", template_name="software_project", project_title="App")
        todos = query_params(opener.last)["to-dos"].split("\n")
        assert todos == list(PROJECT_TEMPLATES["software_project"])
        assert len(todos) == 10
        assert message == 'Successfully created project "App" from software_project template with 10 to-do items'

    def test_custom_template_mixed_entries(self, context, opener):
        call_api(
            "create_project_template",
            template_name="custom",
            project_title="Move",
            custom_todos=["Pack boxes", TemplateTodo(title="Book van"), {"title": "Change address"}],
        )
        assert query_params(opener.last)["to-dos"] == "Pack boxes\nBook van\nChange address"

    def test_custom_without_todos_uses_defaults(self, context, opener):
        call_api("create_project_template", template_name="custom", project_title="Misc")
        assert query_params(opener.last)["to-dos"].split("\n") == list(DEFAULT_CUSTOM_TODOS)

    def test_unknown_template(self, context, opener):
        with pytest.raises(ToolError, match="Unknown template"):
            call_api("create_project_template", template_name="wedding", project_title="X")
        assert opener.urls == []
