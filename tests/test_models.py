from mailsurface.domain.models import AttachmentMeta, MailBody


def test_attachment_meta_from_payload():
    meta = AttachmentMeta.from_payload(
        {"id": "att-1", "contentType": " image/png ", "size": "12", "name": "logo.png", "contentId": "<logo>"}
    )

    assert meta.attachment_id == "att-1"
    assert meta.mime_type == "image/png"
    assert meta.size == 12
    assert meta.content_id == "<logo>"
    assert not meta.is_inline


def test_attachment_meta_defaults_missing_mime():
    meta = AttachmentMeta.from_payload({"id": "att-2", "contentLocation": "banner.gif"})

    assert meta.mime_type == "application/octet-stream"
    assert meta.content_id == "banner.gif"


def test_mail_body_from_html_payload():
    mail = MailBody.from_payload(
        {"id": "msg-1", "body": {"contentType": "HTML", "content": "<p>Hi</p>"}, "bodyPreview": "Hi"},
        [
            {"@odata.type": "#microsoft.graph.fileAttachment", "id": "att-1"},
            {"@odata.type": "#microsoft.graph.referenceAttachment", "id": "att-2"},
        ],
    )

    assert mail.mail_id == "msg-1"
    assert mail.has_html_content
    assert not mail.has_text_content
    assert [meta.attachment_id for meta in mail.attachments] == ["att-1"]


def test_mail_body_from_text_payload_uses_preview_when_empty():
    mail = MailBody.from_payload({"id": "msg-2", "body": {"contentType": "text", "content": ""}, "bodyPreview": "Short"})

    assert not mail.has_html_content
    assert mail.text_content == "Short"


def test_whitespace_only_html_is_not_content():
    assert not MailBody(mail_id="m", html_content="   \n").has_html_content
