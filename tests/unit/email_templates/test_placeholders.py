"""Unit tests for email template placeholders."""

import pytest

from hireboard.modules.email_templates.placeholders import extract_variables, render


pytestmark = pytest.mark.unit


class TestExtractVariables:
    def test_order_of_first_appearance(self):
        variables = extract_variables(
            "Application Received - {{job_title}}",
            "<p>Dear {{applicant_name}}, thanks for applying to {{ job_title }}.</p>",
        )

        assert variables == ["job_title", "applicant_name"]

    def test_condition_names_are_variables(self):
        body = "{{#if remarks}}<p>{{remarks}}</p>{{/if}}<p>{{status}}</p>"

        assert extract_variables(body) == ["remarks", "status"]

    @pytest.mark.parametrize("text", ["No placeholders", "{{ }}", "{{1st}}", "{single}"])
    def test_ignores_non_placeholders(self, text: str):
        assert extract_variables(text) == []


class TestRender:
    def test_fills_values(self):
        rendered = render(
            "Dear {{applicant_name}}, re: {{ job_title }}",
            {"applicant_name": "Asha", "job_title": "Python Developer"},
        )

        assert rendered == "Dear Asha, re: Python Developer"

    def test_unknown_placeholders_are_kept(self):
        assert render("Status: {{status}}", {}) == "Status: {{status}}"

    @pytest.mark.parametrize(
        ("values", "expected"),
        [
            ({"remarks": "Great fit"}, "<p>Great fit</p><p>end</p>"),
            ({"remarks": ""}, "<p>end</p>"),
            ({}, "<p>end</p>"),
        ],
    )
    def test_if_blocks(self, values: dict[str, str], expected: str):
        body = "{{#if remarks}}<p>{{remarks}}</p>{{/if}}<p>end</p>"

        assert render(body, values) == expected

    def test_blocks_span_lines(self):
        body = "{{#if remarks}}\n<p>{{remarks}}</p>\n{{/if}}"

        assert render(body, {"remarks": "ok"}) == "\n<p>ok</p>\n"
