from storm.expr import Select, compile as expr_compile

from rosterlib.database.expr import NotIn
from rosterlib.domain.assignment import Assignment
from rosterlib.domain.person import Employee


def test_not_in_compile():
    expr = NotIn(Employee.id, Select(Assignment.employee_id,
                                     Assignment.end_date == None))
    statement = expr_compile(expr)
    assert statement.startswith('employee.id NOT IN (SELECT')
    assert 'assignment.end_date IS NULL' in statement


def test_not_in(store, example_creator):
    employee = example_creator.create_employee()
    other = example_creator.create_employee()
    example_creator.create_assignment(employee=employee)

    results = store.find(Employee, NotIn(
        Employee.id, Select(Assignment.employee_id)))
    assert list(results) == [other]
