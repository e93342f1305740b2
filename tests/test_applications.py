APPLICATION = {
    "firstName": "Asha",
    "lastName": "Verma",
    "email": "asha@example.com",
    "phone": "+91 90000 00000",
    "program": "Full Stack",
    "experience": "Some HTML and CSS",
    "motivation": "I want to build products",
}


def test_application_with_resume_is_saved_and_mailed(client, mail_service, upload_dir):
    response = client.post(
        "/api/apply",
        data=APPLICATION,
        files={"resume": ("asha.pdf", b"%PDF-1.4 resume", "application/pdf")},
    )

    assert response.status_code == 201
    assert response.json() == {"message": "Application submitted successfully!"}
    sent = mail_service.sent[0]
    assert sent["subject"] == "New Application Received"
    assert "Name: Asha Verma" in sent["body"]
    assert "Resume: Attached" in sent["body"]
    attachment = sent["attachments"][0]
    assert attachment.filename == "asha.pdf"
    assert attachment.path.parent == upload_dir
    assert attachment.path.read_bytes() == b"%PDF-1.4 resume"


def test_application_without_resume(client, mail_service):
    response = client.post("/api/apply", data=APPLICATION)

    assert response.status_code == 201
    assert "Resume: Not provided" in mail_service.sent[0]["body"]
    assert mail_service.sent[0]["attachments"] == []


def test_application_requires_first_name(client):
    data = {key: value for key, value in APPLICATION.items() if key != "firstName"}

    response = client.post("/api/apply", data=data)

    assert response.status_code == 400
    assert response.json() == {"error": "firstName is required"}


def test_application_mail_failure_is_a_server_error(client, mail_service):
    mail_service.fail = True

    response = client.post("/api/apply", data=APPLICATION)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to submit application."}
