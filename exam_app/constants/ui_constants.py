"""User-facing strings and Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Don mutaxassislari bilimlarini baholash platformasi"
PLATFORM_TAGLINE: str = "Don mutaxassislari bilimlarini baholash platformasi"

VERIFY_NAME_PLACEHOLDER: str = "To'liq ism- familya"
VERIFY_CODE_PLACEHOLDER: str = "Access code"
VERIFY_BUTTON: str = "Kirish"
VERIFY_EMPTY_NAME_MESSAGE: str = "Iltimos to'liq ismingizni kiriting."
VERIFY_DENIED_MESSAGE: str = "Invalid code or access denied."
VERIFY_NETWORK_MESSAGE: str = "Network error. Try again."

RULES_TITLE: str = "Muhim qoidalar!"
RULES_ITEMS: tuple[str, ...] = (
    "Test davomiyligi: <b>1 soat</b>.",
    "Testlar soni: <b>25</b>.",
    "Test jarayonida boshqa oyna yoki brauzerga o'tmang.",
    "Test jarayonida dasturni yopmang yoki qayta ishga tushirmang.",
)
RULES_START_BUTTON: str = "Boshlash"
QUESTIONS_LOAD_FAILED_MESSAGE: str = "Failed to load tests"

REMAINING_TIME_LABEL: str = "Qolgan vaqt:"
QUESTION_HEADING_TEMPLATE: str = "{position}- savol"
VIOLATIONS_TEMPLATE: str = "Violations: <b>{count}</b>"
QUESTION_COUNT_TEMPLATE: str = "Savollar: {count}"
FOOTER_TEMPLATE: str = "{name} — {count} questions"
PREV_BUTTON: str = "Oldingi"
NEXT_BUTTON: str = "Keyingi"
FINISH_BUTTON: str = "Tugatish"
FINISH_CONFIRM_TITLE: str = "Tugatish"
FINISH_CONFIRM_MESSAGE: str = "Haqiqatan ham testni tugatmoqchimisiz?"

VIOLATION_WARNING_MESSAGE: str = (
    "Ogohlantirish: siz test oynasidan chiqdingiz, test jarayonida boshqa oyna "
    "yoki ilovaga o'tish mumkin emas."
)
EXIT_GUARD_TITLE: str = "Chiqish"
EXIT_GUARD_MESSAGE: str = (
    "Refreshing or leaving will submit your test and may be considered a violation."
)

FINISHED_TITLE: str = "Test muvaffaqiyatli yakunlandi!"
FINISHED_DESCRIPTION: str = "Test natijalaringiz avtomatik qabul qilindi va jo'natildi."
FINISHED_SCORE_TEMPLATE: str = "Natija: {score}"
SUBMISSION_PENDING_MESSAGE: str = "Natija yuborilmoqda…"
SUBMISSION_SUCCESS_MESSAGE: str = "✅ Test natijangiz yuborildi!"
SUBMISSION_FAILED_MESSAGE: str = "❌ Test natijasi yuborilmadi. Qayta urinib ko‘ring."
REPORT_FAILED_MESSAGE: str = "PDF yaratishda yoki yuborishda xatolik yuz berdi!"

NOTICE_TITLE_INFO: str = "Ma'lumot"
NOTICE_TITLE_WARNING: str = "Ogohlantirish"
NOTICE_TITLE_ERROR: str = "Xatolik"

REPORT_TITLE: str = "Test natijalari"
REPORT_NAME_LABEL: str = "Ism"
REPORT_STARTED_LABEL: str = "Boshlangan vaqt"
REPORT_FINISHED_LABEL: str = "Tugagan vaqt"
REPORT_DURATION_LABEL: str = "Davomiylik"
REPORT_SCORE_LABEL: str = "Ball"
REPORT_CHOSEN_LABEL: str = "Tanlangan javob"
REPORT_CORRECT_LABEL: str = "To‘g‘ri javob"

QUICK_JUMP_COLUMNS: int = 5
PROMPT_FONT_SIZE: int = 14
