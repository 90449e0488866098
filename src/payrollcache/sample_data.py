"""Built-in sample rows used to seed an empty fallback store."""

from payrollcache.core.interfaces.remote_store import Row

SAMPLE_EMPLOYEES: tuple[Row, ...] = (
    {
        "id": "1",
        "name": "أحمد محمد",
        "email": "ahmed@example.com",
        "position": "مهندس برمجيات",
        "department": "تكنولوجيا المعلومات",
        "base_salary": 5000,
        "join_date": "2024-01-01",
        "status": "active",
        "created_at": "2024-01-01T00:00:00+00:00",
    },
    {
        "id": "2",
        "name": "فاطمة علي",
        "email": "fatima@example.com",
        "position": "محاسب",
        "department": "المالية",
        "base_salary": 4500,
        "join_date": "2024-01-01",
        "status": "active",
        "created_at": "2024-01-01T00:00:00+00:00",
    },
)
