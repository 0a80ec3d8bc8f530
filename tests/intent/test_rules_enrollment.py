from lms_assistant.intent.analyzer import analyze


def test_enroll_user_in_course() -> None:
    result = analyze("Enroll john@company.com in course Python Programming")

    assert result.intent == "enroll_user_in_course"
    assert result.confidence == 0.92
    assert result.entities.as_dict() == {
        "email": "john@company.com",
        "courseName": "Python Programming",
        "resourceType": "course",
        "action": "enroll",
    }


def test_enroll_with_assignment_and_validity() -> None:
    result = analyze(
        "Enroll john@company.com in course Data Analysis as mandatory "
        "from 2025-01-01 to 2025-12-31"
    )

    assert result.intent == "enroll_user_in_course"
    assert result.entities.course_name == "Data Analysis"
    assert result.entities.assignment_type == "mandatory"
    assert result.entities.start_validity == "2025-01-01"
    assert result.entities.end_validity == "2025-12-31"


def test_enroll_keeps_email_case() -> None:
    result = analyze("Enroll John.Doe@Company.com in course Excel Training")
    assert result.entities.email == "John.Doe@Company.com"


def test_unenroll_wins_over_enroll() -> None:
    result = analyze("Unenroll john@co.com from course Python Programming")

    assert result.intent == "unenroll_user_from_course"
    assert result.confidence == 0.98
    assert result.entities.email == "john@co.com"
    assert result.entities.course_name == "Python Programming"
    assert result.entities.action == "unenroll"


def test_unenroll_from_learning_plan() -> None:
    result = analyze("Remove john@x.com from learning plan Sales Onboarding")

    assert result.intent == "unenroll_user_from_learning_plan"
    assert result.entities.learning_plan_name == "Sales Onboarding"


def test_unenroll_from_session() -> None:
    result = analyze("Remove john@x.com from session Morning Workshop")

    assert result.intent == "unenroll_user_from_ilt_session"
    assert result.entities.session_name == "Morning Workshop"
    assert result.entities.resource_type == "ilt_session"


def test_bulk_enroll_with_two_emails() -> None:
    result = analyze("Enroll a@x.com and b@x.com in course Excel Training")

    assert result.intent == "bulk_enroll_course"
    assert result.entities.emails == ["a@x.com", "b@x.com"]
    assert result.entities.course_name == "Excel Training"
    assert result.entities.is_bulk is True
    assert result.entities.action == "bulk_enroll"
    assert result.entities.email is None


def test_same_sentence_with_one_email_is_singular() -> None:
    result = analyze("Enroll a@x.com in course Excel Training")

    assert result.intent == "enroll_user_in_course"
    assert result.entities.emails is None
    assert result.entities.email == "a@x.com"


def test_bulk_emails_are_lowercased() -> None:
    result = analyze("Enroll Alice@X.com and BOB@x.com in course Excel Training")
    assert result.entities.emails == ["alice@x.com", "bob@x.com"]


def test_bulk_enroll_team() -> None:
    result = analyze("Enroll marketing team in course Sales Basics")

    assert result.intent == "bulk_enroll_course"
    assert result.entities.team_name == "marketing"
    assert result.entities.emails is None
    assert result.entities.course_name == "Sales Basics"


def test_team_word_in_course_name_is_not_bulk() -> None:
    result = analyze("Enroll john@x.com in course Managers Essentials")

    assert result.intent == "enroll_user_in_course"
    assert result.entities.course_name == "Managers Essentials"


def test_bulk_unenroll_course() -> None:
    result = analyze("Remove a@x.com and b@x.com from course Excel Training")

    assert result.intent == "bulk_unenroll_course"
    assert result.entities.emails == ["a@x.com", "b@x.com"]
    assert result.entities.action == "bulk_unenroll"


def test_bulk_enroll_session() -> None:
    result = analyze("Enroll a@x.com, b@x.com in session Morning Workshop")

    assert result.intent == "bulk_enroll_ilt_session"
    assert result.entities.session_name == "Morning Workshop"
    assert result.entities.resource_type == "ilt_session"


def test_enroll_user_in_learning_plan() -> None:
    result = analyze("Enroll john@company.com in learning plan Data Science Track")

    assert result.intent == "enroll_user_in_learning_plan"
    assert result.confidence == 0.95
    assert result.entities.learning_plan_name == "Data Science Track"
    assert result.entities.resource_type == "learning_plan"


def test_enroll_user_in_session() -> None:
    result = analyze("Enroll john@company.com in session Advanced Excel Workshop")

    assert result.intent == "enroll_user_in_ilt_session"
    assert result.entities.session_name == "Advanced Excel Workshop"
    assert result.entities.action == "enroll"


def test_enroll_user_in_session_by_course() -> None:
    result = analyze("Enroll john@x.com in ILT session for course 2420")

    assert result.intent == "enroll_user_in_ilt_session"
    assert result.entities.course_id == "2420"
    assert result.entities.session_name is None


def test_check_specific_enrollment() -> None:
    result = analyze("Is john@company.com enrolled in course Python Programming?")

    assert result.intent == "check_specific_enrollment"
    assert result.entities.email == "john@company.com"
    assert result.entities.resource_name == "Python Programming"
    assert result.entities.course_name == "Python Programming"
    assert result.entities.resource_type == "course"


def test_check_specific_learning_plan_enrollment() -> None:
    result = analyze("Check if john@x.com is enrolled in learning plan Sales Onboarding")

    assert result.intent == "check_specific_enrollment"
    assert result.entities.resource_type == "learning_plan"
    assert result.entities.learning_plan_name == "Sales Onboarding"


def test_enroll_without_email_is_not_accepted() -> None:
    result = analyze("Enroll in course")
    assert result.intent != "enroll_user_in_course"
