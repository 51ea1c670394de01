from contact_relay.lib.email_templates import build_subject, render_html, render_text
from contact_relay.lib.sanitize import sanitize_html
from contact_relay.lib.validation import Submission


def _sub(**overrides):
    data = {
        "name": "Test User",
        "email": "test@example.com",
        "projectType": "website",
        "message": "Hello",
    }
    data.update(overrides)
    return Submission.from_payload(data)


def test_sanitize_escapes_all_five_characters():
    assert sanitize_html("""<a href="x">Tom & 'Jerry'</a>""") == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; &#039;Jerry&#039;&lt;/a&gt;"
    )


def test_sanitize_escapes_ampersand_first():
    assert sanitize_html("&lt;") == "&amp;lt;"
    assert sanitize_html(sanitize_html("<")) == "&amp;lt;"


def test_html_escapes_user_text():
    hostile = """<script>alert("x")</script> & 'quoted'"""
    html = render_html(_sub(name=hostile, company=hostile, message=hostile, projectType=hostile))
    assert "<script>" not in html
    assert "alert(\"x\")" not in html
    assert "'quoted'" not in html
    assert "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt; &amp; &#039;quoted&#039;" in html


def test_html_fields_and_footer():
    html = render_html(_sub(company="Acme", message="line one\nline two"))
    assert html.startswith("<!DOCTYPE html>")
    assert '<a href="mailto:test@example.com">test@example.com</a>' in html
    assert "Acme" in html
    assert "Website Development" in html
    assert "line one<br>line two" in html
    assert "Reply directly to this email to respond to Test User" in html


def test_html_omits_company_block_when_absent():
    html = render_html(_sub())
    assert "Company" not in html


def test_html_passes_unknown_project_type_through():
    assert "Mobile app" in render_html(_sub(projectType="Mobile app"))


def test_text_rendition():
    text = render_text(_sub(company="Acme & Co", message="<b>hi</b>\nthere"))
    assert text.splitlines()[:2] == [
        "New Contact Form Submission from cybersoft.az",
        "=============================================",
    ]
    assert "Name: Test User" in text
    assert "Email: test@example.com" in text
    assert "Company: Acme & Co" in text
    assert "Project Type: Website Development" in text
    assert "Message:\n<b>hi</b>\nthere\n\n---\n" in text
    assert text.endswith("Reply directly to this email to respond to Test User")


def test_text_omits_company_line_when_absent():
    text = render_text(_sub())
    assert "Company:" not in text
    assert "Email: test@example.com\nProject Type: Website Development" in text


def test_subject_uses_label():
    assert build_subject(_sub(projectType="integration")) == "New Contact: Test User - Integration"
