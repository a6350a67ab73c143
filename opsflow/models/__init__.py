from opsflow.models.employee import Employee, EmployeeStatus
from opsflow.models.license import License, LicenseStatus
from opsflow.models.induction import Induction, InductionStatus
from opsflow.models.employee_document import EmployeeDocument
from opsflow.models.emergency_contact import EmergencyContact
from opsflow.models.folder import Folder
from opsflow.models.document_file import DocumentFile
from opsflow.models.credential import Credential, CredentialCategory, CredentialStatus, PasswordStrength
from opsflow.models.task import Task, TaskPriority, TaskStatus
from opsflow.models.audit_log import AuditLog
