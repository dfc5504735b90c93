from datetime import date

from portal.services import alerts
from portal.services.notification_service import ContentAddress, ContentType


NEWS_RECORD = {
    "id": 12,
    "title": "Temple festival begins",
    "title_ta": "கோவில் திருவிழா தொடக்கம்",
    "excerpt": "Chithirai festival starts today",
    "status": "published",
}


def test_news_published_builds_bilingual_intent():
    intent = alerts.news_published(NEWS_RECORD)
    assert intent.address == ContentAddress(ContentType.NEWS)
    assert intent.content.title == "📰 Temple festival begins"
    assert intent.content.title_ta == "📰 கோவில் திருவிழா தொடக்கம்"
    assert intent.content.body == "Chithirai festival starts today"
    assert intent.content.link == "/news/12"


def test_event_published_formats_day_and_location():
    record = {"id": 3, "title": "Jallikattu", "event_date": "2026-01-14T09:00:00Z", "status": "published"}
    intent = alerts.event_published(record)
    assert intent.address == ContentAddress(ContentType.EVENTS)
    assert intent.content.body == "14 Jan - Madurai"
    assert intent.content.body_ta == "14 Jan - மதுரை"
    assert intent.content.title_ta is None


def test_event_published_accepts_date_objects():
    record = {"id": 3, "title": "Book fair", "event_date": date(2026, 3, 2), "location": "Tamukkam Grounds"}
    assert alerts.event_published(record).content.body == "2 Mar - Tamukkam Grounds"


def test_job_published_body():
    record = {"id": 9, "title": "Driver", "company_name": "TVS", "location": "Madurai"}
    intent = alerts.job_published(record)
    assert intent.address == ContentAddress(ContentType.JOBS)
    assert intent.content.body == "TVS - Madurai"
    assert intent.content.link == "/jobs/9"


def test_emergency_and_weather_use_emergency_topic():
    emergency = alerts.emergency_alert("Flood warning", "Avoid Vaigai riverbanks")
    weather = alerts.weather_alert("Heavy rain", description="Until evening")
    assert emergency.address == ContentAddress(ContentType.EMERGENCY)
    assert emergency.content.title == "🚨 Flood warning"
    assert weather.address == ContentAddress(ContentType.EMERGENCY)
    assert weather.content.body == "Heavy rain - Until evening"
    assert weather.content.has_tamil


def test_content_published_only_on_transition():
    assert alerts.content_published("news", NEWS_RECORD) is not None
    assert alerts.content_published("news", NEWS_RECORD, {"status": "draft"}) is not None
    assert alerts.content_published("news", NEWS_RECORD, {"status": "published"}) is None
    assert alerts.content_published("news", {**NEWS_RECORD, "status": "draft"}) is None


def test_content_published_ignores_other_tables():
    assert alerts.content_published("videos", NEWS_RECORD) is None


def test_event_reminder_mentions_tomorrow():
    intent = alerts.event_reminder({"id": 8, "title": "Car festival", "title_ta": "தேர் திருவிழா", "location": "Alagar Kovil"})
    assert intent.content.title == "⏰ Event Reminder: Car festival"
    assert intent.content.body == "Tomorrow at Alagar Kovil"
    assert intent.content.body_ta == "நாளை Alagar Kovil"
    assert intent.content.link == "/events/8"


def test_due_event_reminders_pick_tomorrows_published_events():
    today = date(2026, 1, 13)
    records = [
        {"id": 1, "title": "Float festival", "event_date": "2026-01-14T18:00:00Z", "status": "published"},
        {"id": 2, "title": "Book fair", "event_date": "2026-01-15", "status": "published"},
        {"id": 3, "title": "Draft meetup", "event_date": "2026-01-14", "status": "draft"},
        {"id": 4, "title": "Kolam contest", "event_date": date(2026, 1, 14)},
        {"id": 5, "title": "Undated talk"},
    ]

    reminders = alerts.due_event_reminders(records, today=today)

    assert [r.content.link for r in reminders] == ["/events/1", "/events/4"]
    assert all(r.address == ContentAddress(ContentType.EVENTS) for r in reminders)


def test_due_event_reminders_empty_input():
    assert alerts.due_event_reminders([], today=date(2026, 1, 13)) == []
