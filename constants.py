"""
Global Constants Module

Contains the timing constants, storage namespaces, standardized log messages and
the baseline analysis texts used across agents. Serves as the single source of
truth for these values.
"""


class TimingConstants:
    """Timing constants for the simulated analysis latency. All values in seconds."""

    # Simulated analysis latency (baseline workflow delays)
    REVIEW_DELAY = 3.0          # CV review
    JOB_MATCH_DELAY = 3.0       # job match analysis
    COVER_LETTER_DELAY = 2.0    # cover letter drafting

    # Upper bound for any configured delay
    MAX_ANALYSIS_DELAY = 60.0


class StorageKeys:
    """Fixed namespace per entity collection in the storage medium."""

    CVS = "cvs"
    CV_REVIEWS = "cv_reviews"
    JOB_MATCHES = "job_matches"
    COVER_LETTERS = "cover_letters"
    USER_PROFILE = "user_profile"

    ALL = (CVS, CV_REVIEWS, JOB_MATCHES, COVER_LETTERS, USER_PROFILE)


class UploadLimits:
    """Advisory limits for uploaded CV documents."""

    ACCEPTED_EXTENSIONS = (".pdf", ".doc", ".docx", ".txt")
    MAX_SIZE_BYTES = 5 * 1024 * 1024  # 5MB


class Messages:
    """
    Standard messages used across agents for consistent logging.
    """
    # Workflow lifecycle
    WORKFLOW_STARTED = "{} started"
    WORKFLOW_COMPLETED = "{} completed: {}"
    WORKFLOW_FAILED = "{} failed: {}"
    WORKFLOW_BUSY = "{} is already pending, request rejected"
    WORKFLOW_RESET = "{} reset to idle"

    # Storage
    ENTITY_SAVED = "Saved {} '{}'"
    ENTITY_DELETED = "Deleted {} '{}'"
    ENTITY_NOT_FOUND = "{} '{}' not found"
    STORAGE_UNAVAILABLE = "Storage unavailable while writing '{}': {}"

    # Profile
    PROFILE_CREATED = "Profile created for: {}"
    PROFILE_UPDATED = "Profile updated for: {}"

    # Uploads
    UPLOAD_UNSUPPORTED = "Uploaded file '{}' has an unsupported extension (accepted: {})"
    UPLOAD_TOO_LARGE = "Uploaded file '{}' is {} bytes, above the {} byte limit"
    UPLOAD_EMPTY = "Uploaded file '{}' is empty"


class BaselineTexts:
    """Fixed outputs of the baseline (simulated) analysis strategies."""

    REVIEW_SCORE = 78
    REVIEW_STRENGTHS = [
        "Clear structure and organization",
        "Good use of action verbs",
        "Quantifiable achievements included",
    ]
    REVIEW_IMPROVEMENTS = [
        "Consider adding more keywords from the industry",
        "Professional summary could be more impactful",
        "Too many bullet points in work experience",
    ]
    REVIEW_SUGGESTIONS = (
        "Try to focus on the most relevant experiences for your target role. "
        "Consider removing older positions that aren't directly relevant. "
        "Use more industry-specific keywords that will help your CV pass through ATS systems."
    )

    MATCH_SCORE = 74
    MATCH_MISSING_SKILLS = ["Docker", "AWS", "TypeScript"]
    MATCH_SUGGESTIONS = (
        "Your CV matches many of the key requirements, but you could improve your chances "
        "by highlighting your experience with similar technologies and adding any relevant "
        "experience you might have with cloud services. Consider adding specific metrics to "
        "demonstrate your impact in previous roles."
    )

    COVER_LETTER_NAME = "My Cover Letter"
    COVER_LETTER_TEMPLATE = (
        "Dear Hiring Manager,\n\n"
        "I am writing to express my interest in the {job_title} position at {company_name}. "
        "With my background and skills, I believe I would be a valuable addition to your team.\n\n"
        "Throughout my career, I have developed expertise in areas that align perfectly with the "
        "requirements outlined in your job description. "
        "I am particularly drawn to this opportunity because of your company's reputation for "
        "innovation and excellence.\n\n"
        "I look forward to the opportunity to further discuss how my experience and skills would "
        "benefit {company_name}. "
        "Thank you for considering my application.\n\n"
        "Sincerely,\n"
        "{signature}"
    )
    DEFAULT_SIGNATURE = "[Your Name]"


class DebugTiming:
    """When and how simulated waits are traced in the debug log."""

    ENABLED = True
    LOG_ALL_WAITS = False
    LONG_WAIT_THRESHOLD = 1.0  # seconds; shorter waits are not traced

    START_FORMAT = "Waiting {seconds:.2f}s: {reason}"
    END_FORMAT = "Wait finished after {duration:.2f}s"


class DebugSleepHelper:
    @staticmethod
    def format_sleep_start(seconds: float, reason: str = "") -> str:
        return DebugTiming.START_FORMAT.format(seconds=seconds, reason=reason or "unspecified")

    @staticmethod
    def format_sleep_end(duration: float) -> str:
        return DebugTiming.END_FORMAT.format(duration=duration)

    @staticmethod
    def should_log_wait(duration: float) -> bool:
        if not DebugTiming.ENABLED:
            return False
        return DebugTiming.LOG_ALL_WAITS or duration >= DebugTiming.LONG_WAIT_THRESHOLD
