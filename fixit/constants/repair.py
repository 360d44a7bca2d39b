"""
Ticket vocabulary: statuses, priorities, asset types and their display labels.
"""

STATUS_PENDING = "Pending"
STATUS_IN_PROGRESS = "In Progress"
STATUS_VENDOR_CONTACTED = "Vendor Contacted"
STATUS_COMPLETED = "Completed"

REPAIR_STATUSES = [
    STATUS_PENDING,
    STATUS_IN_PROGRESS,
    STATUS_VENDOR_CONTACTED,
    STATUS_COMPLETED,
]

STATUS_LABELS = {
    STATUS_PENDING: "รอรับเรื่อง",
    STATUS_IN_PROGRESS: "กำลังดำเนินการ",
    STATUS_VENDOR_CONTACTED: "ส่งซ่อมร้าน",
    STATUS_COMPLETED: "ซ่อมเสร็จแล้ว",
}

PRIORITY_LEVELS = ["Normal", "Urgent", "Critical"]

PRIORITY_LABELS = {
    "Normal": "ปกติ",
    "Urgent": "เร่งด่วน",
    "Critical": "เร่งด่วนที่สุด",
}

OTHER_ASSET_TYPE = "อื่น ๆ"

ASSET_TYPES = [
    "คอมพิวเตอร์ (Computer)",
    "โปรเจคเตอร์ (Projector)",
    "เครื่องฉายภาพ 3 มิติ (Visual)",
    "ระบบเสียง (Sound System)",
    "แอร์ (Air Condition)",
    OTHER_ASSET_TYPE,
]

ROLE_STAFF = "staff"
ROLE_USER = "user"

INITIAL_USERS = [
    {"user": "admin", "pass": "1111", "role": ROLE_STAFF, "name": "เจ้าหน้าที่พัสดุ", "position": "หัวหน้างานพัสดุ", "dept": "งานพัสดุ"},
    {"user": "teacher01", "pass": "2222", "role": ROLE_USER, "name": "ครูสมชาย ใจดี", "position": "ครูชำนาญการ", "dept": "หมวดวิทย์"},
]

DEFAULT_INVENTORY_CATEGORY = "อะไหล่คอมพิวเตอร์"
DEFAULT_INVENTORY_UNIT = "ชิ้น"

MAINTENANCE_PERIODS = ["Monthly", "Quarterly", "Yearly"]
MAINTENANCE_STATUSES = ["Upcoming", "Done", "Overdue"]

LOGIN_FAILED_MESSAGE = "ชื่อผู้ใช้หรือรหัสผ่านไม่ถูกต้อง"
NO_EXPORT_DATA_MESSAGE = "ไม่มีข้อมูลสำหรับส่งออก"
BULK_IMPORT_INVALID_MESSAGE = "รูปแบบข้อมูลไม่ถูกต้อง กรุณาตรวจสอบข้อมูลอีกครั้ง"
