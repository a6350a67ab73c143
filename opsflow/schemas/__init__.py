from opsflow.schemas.employee import EmployeeBrief, EmployeeCreate, EmployeeOut, EmployeeUpdate
from opsflow.schemas.license import LicenseCreate, LicenseOut, LicenseUpdate, LicenseWithEmployeeOut
from opsflow.schemas.induction import (
    InductionCreate,
    InductionOut,
    InductionProgressUpdate,
    InductionUpdate,
    InductionWithEmployeeOut,
    ProgressStatus,
)
from opsflow.schemas.emergency_contact import EmergencyContactCreate, EmergencyContactOut, EmergencyContactUpdate
from opsflow.schemas.employee_document import EmployeeDocumentCreate, EmployeeDocumentOut, EmployeeDocumentUpdate
from opsflow.schemas.folder import FolderCreate, FolderOut, FolderUpdate
from opsflow.schemas.document_file import (
    DocumentBatchRequest,
    DocumentBatchResult,
    DocumentFileCreate,
    DocumentFileOut,
    DocumentFileUpdate,
)
from opsflow.schemas.credential import (
    CredentialCategoryCreate,
    CredentialCategoryOut,
    CredentialCreate,
    CredentialOut,
    CredentialUpdate,
)
from opsflow.schemas.task import TaskBoardOut, TaskCreate, TaskOut, TaskUpdate
