"""
Business operation type constants
Used as the operationType field of business log records
"""


class OperationType:
    """Operation types"""

    # Auth
    AUTH_LOGIN = "auth.login"
    AUTH_LOGIN_FAILED = "auth.login_failed"

    # Repair tickets
    TICKET_CREATE = "ticket.create"
    TICKET_UPDATE = "ticket.update"
    TICKET_DELETE = "ticket.delete"
    TICKET_RATE = "ticket.rate"
    TICKET_EXPORT = "ticket.export"
    TICKET_PRINT = "ticket.print"
    TICKET_ASSIST = "ticket.assist"

    # Users
    USER_SAVE = "user.save"
    USER_BULK_IMPORT = "user.bulk_import"
    USER_DELETE = "user.delete"

    # Inventory
    INVENTORY_SAVE = "inventory.save"
    INVENTORY_DELETE = "inventory.delete"

    # Preventive maintenance
    MAINTENANCE_SAVE = "maintenance.save"


class OperationResult:
    """Operation results"""
    SUCCESS = "success"
    FAILED = "failed"
