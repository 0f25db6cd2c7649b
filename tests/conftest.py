import pytest


SSC_CGL_NOTICE = (
    "SSC CGL 2026 Recruitment Notification\n"
    "Staff Selection Commission\n"
    "Last Date: 15/03/2026\n"
    "General: Rs. 100\n"
    "Age Limit: 18 to 27 years\n"
    "Total Post: 5000\n"
    "Selection Process: Written Exam, Interview\n"
)


@pytest.fixture
def ssc_cgl_notice():
    return SSC_CGL_NOTICE
