def test_feedback_requires_name_role_and_quote(client):
    response = client.post("/api/feedback", data={"name": "ravi", "quote": "Great course"})

    assert response.status_code == 400
    assert response.json() == {"error": "Name, role, and quote are required."}


def test_feedback_is_normalised_and_listed(client, upload_dir):
    response = client.post(
        "/api/feedback",
        data={
            "name": "  ravi kumar ",
            "role": "FRONTEND intern",
            "quote": "The mentors were fantastic.",
            "badges": "React, Mentorship ,",
            "linkedin": "https://linkedin.com/in/ravi",
        },
        files={"image": ("photo.png", b"\x89PNG fake", "image/png")},
    )
    assert response.status_code == 201
    assert response.json() == {"message": "Feedback submitted successfully!"}

    items = client.get("/api/feedback").json()

    assert len(items) == 1
    item = items[0]
    assert item["name"] == "Ravi Kumar"
    assert item["role"] == "Frontend Intern"
    assert item["company"] == "IgnitAI"
    assert item["badges"] == ["React", "Mentorship"]
    assert item["rating"] == 5
    assert item["image"].startswith("/uploads/")
    assert item["image"].endswith("-photo.png")
    stored = upload_dir / item["image"].rsplit("/", 1)[1]
    assert stored.read_bytes() == b"\x89PNG fake"


def test_feedback_rating_defaults_when_unparseable(client):
    for rating in ("4", "not-a-number", "0", "nan", "NaN"):
        client.post("/api/feedback", data={"name": "a", "role": "b", "quote": rating, "rating": rating})

    ratings = {item["quote"]: item["rating"] for item in client.get("/api/feedback").json()}

    assert ratings == {"4": 4, "not-a-number": 5, "0": 5, "nan": 5, "NaN": 5}


def test_title_case_keeps_punctuation_and_spacing(client):
    client.post("/api/feedback", data={"name": "(john)  o'BRIEN", "role": "qa-lead", "quote": "ok"})

    item = client.get("/api/feedback").json()[0]

    assert item["name"] == "(John)  O'brien"
    assert item["role"] == "Qa-lead"


def test_repeated_badge_fields_are_kept_as_sent(client):
    client.post(
        "/api/feedback",
        data={"name": "a", "role": "b", "quote": "ok", "badges": ["React, Redux", " Mentorship "]},
    )

    assert client.get("/api/feedback").json()[0]["badges"] == ["React, Redux", "Mentorship"]


def test_feedback_list_is_newest_first(client):
    for quote in ("first", "second"):
        client.post("/api/feedback", data={"name": "a", "role": "b", "quote": quote})

    quotes = [item["quote"] for item in client.get("/api/feedback").json()]

    assert quotes == ["second", "first"]


def test_contact_requires_all_fields(client, mail_service):
    response = client.post("/api/contact", json={"name": "Ravi", "email": "ravi@example.com", "subject": "Hi"})

    assert response.status_code == 400
    assert response.json() == {"error": "All fields are required."}
    assert mail_service.sent == []


def test_contact_relays_with_reply_to(client, mail_service):
    response = client.post(
        "/api/contact",
        json={"name": "Ravi", "email": "ravi@example.com", "subject": "Batch dates", "message": "When is the next batch?"},
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Message sent successfully!"}
    sent = mail_service.sent[0]
    assert sent["subject"] == "Contact Form: Batch dates"
    assert sent["reply_to"] == "ravi@example.com"
    assert "When is the next batch?" in sent["body"]


def test_contact_mail_failure_is_a_server_error(client, mail_service):
    mail_service.fail = True

    response = client.post(
        "/api/contact",
        json={"name": "Ravi", "email": "ravi@example.com", "subject": "Hi", "message": "Hello"},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to send message."}
