from mapping_dashboard.models.employee import Employee
from mapping_dashboard.models.employee_mapping import EmployeeMapping
from mapping_dashboard.models.mapping_record import MappingRecord
from mapping_dashboard.models.report import Report
from mapping_dashboard.models.upload_record import UploadRecord

__all__ = [ "Employee", "EmployeeMapping", "MappingRecord",
           "Report", "UploadRecord" ]
