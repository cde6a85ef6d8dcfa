"""
Resource catalogue
Every list page of the portal, grouped by area.
"""
from datetime import date

from office_portal.components import register_resource
from office_portal.core.normalize import parse_date
from .descriptors import ResourceDescriptor, ViewField as F


# --- Data manager -------------------------------------------------------

register_resource(ResourceDescriptor(
    slug='bank',
    title='Bank Documents',
    endpoint='/api/bankdocuments',
    section='data-manager',
    fields=[
        F('documentType', 'Document Type'),
        F('bankName', 'Bank Name'),
        F('accountNumber', 'Account Number'),
        F('date', 'Date', 'date'),
        F('status', 'Status', 'status'),
    ],
    search_fields=['documentType', 'bankName', 'accountNumber'],
    facet='status',
    csv_filename='bank_documents.csv',
))

register_resource(ResourceDescriptor(
    slug='billing',
    title='Billing Management',
    endpoint='/api/billings',
    section='data-manager',
    fields=[
        F('invoiceNumber', 'Invoice Number', default='INV-{id}'),
        F('clientName', 'Client', source='client', default='Unknown Client'),
        F('amount', 'Amount', 'currency'),
        F('date', 'Due Date', 'date', source='dueDate'),
        F('status', 'Status', 'status', default='pending'),
        F('description', 'Type', source='type', default='No description'),
    ],
    search_fields=['invoiceNumber', 'clientName', 'description'],
    facet='status',
    csv_filename='billing_data.csv',
))

register_resource(ResourceDescriptor(
    slug='ca',
    title='CA Documents',
    endpoint='/api/cadocuments',
    section='data-manager',
    fields=[
        F('documentNumber', 'Document Number'),
        F('client', 'Client'),
        F('amount', 'Amount', 'currency'),
        F('date', 'Date', 'date'),
        F('description', 'Description'),
        F('status', 'Status', 'status', default='pending'),
    ],
    search_fields=['documentNumber', 'client', 'description'],
    facet='status',
    csv_filename='ca_documents.csv',
))

register_resource(ResourceDescriptor(
    slug='finance',
    title='Finance Reports',
    endpoint='/api/financereports',
    section='data-manager',
    fields=[
        F('reportType', 'Report Type'),
        F('period', 'Period'),
        F('date', 'Date', 'date'),
        F('status', 'Status', 'status'),
        F('amount', 'Amount', 'currency'),
        F('department', 'Department'),
        F('preparedBy', 'Prepared By'),
    ],
    search_fields=['reportType', 'period', 'department', 'status', 'preparedBy'],
    facet='status',
    csv_filename='finance_reports.csv',
))

register_resource(ResourceDescriptor(
    slug='logistics',
    title='Logistics Documents',
    endpoint='/api/logisticsdocuments',
    section='data-manager',
    fields=[
        F('documentType', 'Document Type'),
        F('reference', 'Reference'),
        F('date', 'Date', 'date'),
        F('status', 'Status', 'status'),
        F('origin', 'Origin'),
        F('destination', 'Destination'),
        F('carrier', 'Carrier'),
    ],
    search_fields=['documentType', 'reference', 'origin', 'destination', 'carrier'],
    facet='status',
    csv_filename='logistics_documents.csv',
))

register_resource(ResourceDescriptor(
    slug='purchase',
    title='Purchase Management',
    endpoint='/api/purchases',
    section='data-manager',
    fields=[
        F('vendor', 'Vendor'),
        F('amount', 'Amount', 'currency'),
        F('date', 'Date', 'date'),
        F('status', 'Status', 'status'),
        F('paymentStatus', 'Payment Status', 'status'),
        F('paymentMethod', 'Payment Method'),
    ],
    search_fields=['vendor', 'paymentMethod', 'status', 'paymentStatus'],
    facet='status',
    csv_filename='purchases.csv',
))

register_resource(ResourceDescriptor(
    slug='registration',
    title='Company Registration',
    endpoint='/api/companyregistrations',
    section='data-manager',
    fields=[
        F('companyName', 'Company Name'),
        F('registrationNumber', 'Registration Number'),
        F('type', 'Type'),
        F('date', 'Date', 'date'),
        F('status', 'Status', 'status'),
    ],
    search_fields=['companyName', 'registrationNumber', 'type'],
    facet='status',
    csv_filename='company_registrations.csv',
))

register_resource(ResourceDescriptor(
    slug='tender',
    title='Tender Management',
    endpoint='/api/tenders',
    section='data-manager',
    fields=[
        F('tenderNumber', 'Tender Number'),
        F('title', 'Title'),
        F('organization', 'Organization'),
        F('submissionDate', 'Submission Date', 'date'),
        F('openingDate', 'Opening Date', 'date'),
        F('estimatedValue', 'Estimated Value', 'currency'),
        F('category', 'Category'),
        F('status', 'Status', 'status'),
    ],
    search_fields=['tenderNumber', 'title', 'organization', 'category'],
    facet='status',
    csv_filename='tenders.csv',
))


# --- Store --------------------------------------------------------------

def _store_item_fields(*extra):
    return [
        F('name', 'Name'),
        F('productNumber', 'Product Number'),
        F('quantity', 'Quantity', 'number'),
        F('category', 'Category'),
        F('location', 'Location'),
        F('condition', 'Condition', 'status', source='itemCondition', default='good', lower=True),
        F('lastUpdated', 'Last Updated', 'date'),
    ] + list(extra)


STORE_ITEM_SEARCH = ['name', 'productNumber', 'category', 'location']

STORE_ITEM_TABLES = [
    ('stationary-regular', 'Regular Office Supplies', '/store/stationary/regular'),
    ('stationary-fixed', 'Fixed Office Supplies', '/store/stationary/fixed'),
    ('lab-instruments', 'Lab Equipment', '/store/lab/instruments'),
    ('lab-components', 'Spare Parts & Modules', '/store/lab/components'),
    ('lab-materials', 'Lab Consumables', '/store/lab/materials'),
    ('assets-furniture', 'Office Furniture & Fixtures', '/store/assets/furniture'),
    ('assets-systems', 'Computers & Electronic Systems', '/store/assets/systems'),
]

for _slug, _title, _endpoint in STORE_ITEM_TABLES:
    register_resource(ResourceDescriptor(
        slug=_slug,
        title=_title,
        endpoint=_endpoint,
        section='store',
        fields=_store_item_fields(),
        search_fields=STORE_ITEM_SEARCH,
        facet='category',
    ))

register_resource(ResourceDescriptor(
    slug='assets-printers',
    title='Printers & Office Equipment',
    endpoint='/store/assets/printers',
    section='store',
    fields=_store_item_fields(
        F('manufacturer', 'Manufacturer'),
        F('model', 'Model'),
        F('serialNumber', 'Serial Number'),
        F('lastMaintenance', 'Last Maintenance', 'date'),
    ),
    search_fields=STORE_ITEM_SEARCH + ['manufacturer', 'model', 'serialNumber'],
    facet='category',
))


def _transaction_fields(*extra):
    return [
        F('item', 'Item'),
        F('productNumber', 'Product Number'),
        F('type', 'Type', 'status', default='in', lower=True),
        F('quantity', 'Quantity', 'number'),
        F('date', 'Date', 'date'),
        F('location', 'Location'),
        F('notes', 'Notes'),
    ] + list(extra)


def _date_or_today(row, raw):
    """Movement logs without a usable date are shown as today's"""
    if parse_date(raw.get('date')) is None:
        row['date'] = date.today().isoformat()
    return row


register_resource(ResourceDescriptor(
    slug='stationary-inventory',
    title='Inventory Transactions',
    endpoint='/store/stationary/inventory',
    section='store',
    fields=_transaction_fields(),
    search_fields=['item', 'productNumber', 'location', 'notes'],
    facet='type',
))

register_resource(ResourceDescriptor(
    slug='lab-inventory',
    title='Usage & Movement Logs',
    endpoint='/store/lab/inventory',
    section='store',
    fields=_transaction_fields(
        F('category', 'Category'),
        F('itemCondition', 'Condition', default='New'),
    ),
    search_fields=['item', 'productNumber', 'category', 'location', 'notes'],
    facet='type',
    postprocess=_date_or_today,
))

register_resource(ResourceDescriptor(
    slug='materials',
    title='Materials In/Out',
    endpoint='/api/materials',
    section='store',
    fields=[
        F('name', 'Name'),
        F('partNumber', 'Part Number'),
        F('type', 'Type', 'status', lower=True),
        F('quantity', 'Quantity', 'number'),
        F('collectDate', 'Collect Date', 'date'),
        F('returnDate', 'Return Date', 'date'),
        F('personName', 'Person'),
        F('department', 'Department'),
        F('remarks', 'Remarks'),
    ],
    search_fields=['name', 'partNumber', 'personName', 'department'],
    facet='type',
))


# --- Finance manager ----------------------------------------------------

register_resource(ResourceDescriptor(
    slug='salaries',
    title='Salaries',
    endpoint='/api/salaries',
    section='finance-manager',
    fields=[
        F('empName', 'Employee Name'),
        F('empId', 'Employee ID'),
        F('reimbursement', 'Reimbursement'),
        F('amount', 'Amount', 'currency'),
        F('date', 'Date', 'date'),
        F('remarks', 'Remarks'),
    ],
    search_fields=['empName', 'empId', 'remarks'],
))


def _bill_fields():
    return [
        F('accountNo', 'Account No'),
        F('month', 'Month'),
        F('payment', 'Payment', 'currency'),
        F('paymentDate', 'Payment Date', 'date'),
        F('paymentMode', 'Payment Mode'),
        F('remarks', 'Remarks'),
    ]


register_resource(ResourceDescriptor(
    slug='rent',
    title='Facility Rent',
    endpoint='/api/rent',
    section='finance-manager',
    fields=[
        F('month', 'Month'),
        F('description', 'Description'),
        F('amount', 'Amount', 'currency'),
        F('paymentDate', 'Payment Date', 'date'),
        F('paymentMode', 'Payment Mode'),
        F('remarks', 'Remarks'),
    ],
    search_fields=['month', 'description', 'paymentMode', 'remarks'],
    facet='paymentMode',
))

register_resource(ResourceDescriptor(
    slug='electric-bills',
    title='Electricity Charges',
    endpoint='/api/electric-bills',
    section='finance-manager',
    fields=[
        F('accountNo', 'Account No'),
        F('month', 'Month'),
        F('amount', 'Amount', 'currency'),
        F('paymentDate', 'Payment Date', 'date'),
        F('paymentMode', 'Payment Mode'),
        F('remarks', 'Remarks'),
    ],
    search_fields=['accountNo', 'month', 'paymentMode', 'remarks'],
    facet='paymentMode',
))

register_resource(ResourceDescriptor(
    slug='sim-bills',
    title='SIM Bills',
    endpoint='/api/sim-bills',
    section='finance-manager',
    fields=_bill_fields(),
    search_fields=['accountNo', 'month', 'paymentMode', 'remarks'],
    facet='paymentMode',
))

register_resource(ResourceDescriptor(
    slug='internet-bills',
    title='Internet Bills',
    endpoint='/api/internet-bills',
    section='finance-manager',
    fields=_bill_fields(),
    search_fields=['accountNo', 'month', 'paymentMode', 'remarks'],
    facet='paymentMode',
))

register_resource(ResourceDescriptor(
    slug='travel',
    title='Travel Expenses',
    endpoint='/api/travel',
    section='finance-manager',
    fields=[
        F('vendor', 'Vendor'),
        F('fromDate', 'From', 'date'),
        F('toDate', 'To', 'date'),
        F('noOfDays', 'Days', 'number'),
        F('advancePay', 'Advance Pay', 'currency'),
        F('paymentMode', 'Payment Mode'),
        F('paymentDate', 'Payment Date', 'date'),
        F('remarks', 'Remarks'),
    ],
    search_fields=['vendor', 'paymentMode', 'remarks'],
    facet='paymentMode',
))

register_resource(ResourceDescriptor(
    slug='expo-advertisements',
    title='Expo & Advertisement',
    endpoint='/api/expo-advertisements',
    section='finance-manager',
    fields=[
        F('description', 'Description'),
        F('amount', 'Amount', 'currency'),
        F('date', 'Date', 'date'),
    ],
    search_fields=['description'],
))

register_resource(ResourceDescriptor(
    slug='petty-cash',
    title='Petty Cash',
    endpoint='/api/petty-cash',
    section='finance-manager',
    fields=[
        F('item_name', 'Item'),
        F('paid_to', 'Paid To'),
        F('bill_no', 'Bill No'),
        F('amount', 'Amount', 'currency'),
        F('paymentMode', 'Payment Mode'),
        F('payment_date', 'Payment Date', 'date'),
        F('remarks', 'Remarks'),
    ],
    search_fields=['item_name', 'paid_to', 'bill_no'],
    facet='paymentMode',
))


# --- HR -----------------------------------------------------------------

register_resource(ResourceDescriptor(
    slug='employees',
    title='Employees',
    endpoint='/api/employees',
    section='hr',
    fields=[
        F('employeeId', 'Employee ID'),
        F('employeeName', 'Name'),
        F('position', 'Position'),
        F('department', 'Department'),
        F('email', 'Email'),
        F('phoneNumber', 'Phone'),
        F('joiningDate', 'Joining Date', 'date'),
        F('status', 'Status', 'status'),
    ],
    search_fields=['employeeId', 'employeeName', 'position', 'department', 'email'],
    facet='status',
))

register_resource(ResourceDescriptor(
    slug='bank-details',
    title='Bank Details',
    endpoint='/api/bankdocuments',
    section='hr',
    fields=[
        F('employeeId', 'Employee ID'),
        F('employeeName', 'Employee Name'),
        F('bankName', 'Bank Name', default='-'),
        F('bankAccount', 'Account Number', default='-'),
        F('pfNumber', 'PF Number', default='-'),
        F('uan', 'UAN', default='-'),
        F('panNumber', 'PAN', default='-'),
    ],
    search_fields=['employeeId', 'employeeName', 'bankName'],
    csv_filename='bank_details.csv',
))

register_resource(ResourceDescriptor(
    slug='hr-documents',
    title='Employee Documents',
    endpoint='/api/hr/documents',
    section='hr',
    fields=[
        F('employeeId', 'Employee ID'),
        F('documentType', 'Document Type', lower=True),
        F('fileName', 'File Name'),
        F('originalFileName', 'Original File Name'),
        F('fileType', 'File Type'),
        F('size', 'Size', 'number'),
        F('status', 'Status', 'status', default='pending'),
    ],
    search_fields=['fileName', 'employeeId'],
    facet='documentType',
))


def _activity_priority(row, raw):
    """'High Priority' -> 'high'"""
    row['priority'] = row['priority'].replace(' priority', '').strip()
    return row


register_resource(ResourceDescriptor(
    slug='activities',
    title='HR Activities',
    endpoint='/api/activities',
    section='hr',
    fields=[
        F('title', 'Title'),
        F('description', 'Description'),
        F('date', 'Date', 'date', source='activityDate'),
        F('time', 'Time', source='activityTime'),
        F('status', 'Status', 'status', lower=True),
        F('assignedTo', 'Assigned To'),
        F('priority', 'Priority', lower=True),
        F('category', 'Category'),
        F('notes', 'Notes'),
    ],
    search_fields=['title', 'description', 'assignedTo'],
    facet='status',
    postprocess=_activity_priority,
))

register_resource(ResourceDescriptor(
    slug='leave-requests',
    title='Leave Requests',
    endpoint='/api/leave-requests',
    section='hr',
    fields=[
        F('employeeId', 'Employee ID'),
        F('employeeName', 'Employee'),
        F('leaveType', 'Leave Type'),
        F('startDate', 'Start Date', 'date'),
        F('endDate', 'End Date', 'date'),
        F('numberOfDays', 'Days', 'number'),
        F('status', 'Status', 'status', default='pending', lower=True),
        F('reason', 'Reason'),
        F('hrComments', 'HR Comments'),
    ],
    search_fields=['employeeName', 'employeeId', 'leaveType', 'status'],
    facet='status',
))


# --- Admin --------------------------------------------------------------

def _report_fields():
    return [
        F('title', 'Title'),
        F('type', 'Type', lower=True),
        F('subtype', 'Subtype'),
        F('date', 'Date', 'date'),
        F('status', 'Status', 'status', default='draft', lower=True),
        F('employeeId', 'Employee ID'),
        F('employeeName', 'Employee'),
        F('department', 'Department'),
        F('customerName', 'Customer'),
        F('content', 'Content'),
    ]


register_resource(ResourceDescriptor(
    slug='reports',
    title='Reports',
    endpoint='/api/reports',
    section='admin',
    fields=_report_fields(),
    search_fields=['title', 'content', 'employeeName', 'employeeId'],
    facet='type',
))


def _memo_recipients(row, raw):
    """Memos sent to everyone read 'All' instead of a count"""
    if raw.get('sentToAll'):
        row['recipients'] = 'All'
    return row


register_resource(ResourceDescriptor(
    slug='memos',
    title='Memos',
    endpoint='/api/memos',
    section='admin',
    fields=[
        F('title', 'Title'),
        F('meetingType', 'Meeting Type'),
        F('meetingDate', 'Meeting Date', 'date'),
        F('priority', 'Priority'),
        F('sentByName', 'Sent By'),
        F('recipients', 'Recipients', source='totalRecipients'),
        F('sentAt', 'Sent At', 'date'),
        F('content', 'Content'),
    ],
    search_fields=['title', 'meetingType', 'sentByName', 'content'],
    facet='priority',
    postprocess=_memo_recipients,
))


# --- Employee self-service ----------------------------------------------

register_resource(ResourceDescriptor(
    slug='my-reports',
    title='My Reports',
    endpoint='/api/reports/employee/{employeeId}',
    section='employee',
    fields=_report_fields(),
    search_fields=['title', 'content'],
    facet='type',
))

register_resource(ResourceDescriptor(
    slug='payslips',
    title='Payslips',
    endpoint='/api/payroll/payslips/metadata',
    params={'employeeId': '{employeeId}'},
    section='employee',
    fields=[
        F('monthName', 'Month'),
        F('year', 'Year', 'number'),
        F('netPay', 'Net Pay', 'currency'),
        F('payslipUrl', 'Payslip'),
    ],
    search_fields=['monthName', 'year'],
))
