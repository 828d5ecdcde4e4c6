import pytest

from roster.domain import Course, Student, Teacher
from roster.persistence import TextRosterRepository, load, save
from roster.service import RosterService
from roster.session import RosterSession
from roster.controller import RosterController


class ScriptedView:
    """View mit vorgegebenen Eingaben, merkt sich alle Ausgaben."""

    def __init__(self, inputs):
        self._inputs = list(inputs)
        self.messages = []
        self.overviews = []

    def prompt(self, frage):
        return self._inputs.pop(0)

    def show_message(self, text):
        self.messages.append(text)

    def render(self, overview):
        self.overviews.append(overview)

    def render_menu(self):
        pass


def _controller(inputs, session=None, default_path="roster.txt"):
    view = ScriptedView(inputs)
    session = session if session is not None else RosterSession()
    controller = RosterController(session, TextRosterRepository(), RosterService(), view, default_path)
    return controller, session, view


def test_add_student():
    controller, session, _ = _controller(["5", "Ann", "10, 11"])
    controller.add_student()
    assert session.records == [Student(id=5, name="Ann", courses=[10, 11])]


def test_add_teacher_with_no_courses():
    controller, session, _ = _controller(["1", "Bob", "12", ""])
    controller.add_teacher()
    assert session.records == [Teacher(id=1, name="Bob", experience=12, courses=[])]


def test_add_course():
    controller, session, _ = _controller(["10", "Math", "1", "5"])
    controller.add_course()
    assert session.records == [Course(id=10, name="Math", teacher_id=1, students=[5])]


@pytest.mark.parametrize("inputs", [
    ["x", "Ann", "1"],
    ["1", "Ann", "1,a"],
])
def test_add_student_invalid_input(inputs):
    controller, session, view = _controller(inputs)
    controller.add_student()
    assert len(session) == 0
    assert view.messages[-1].startswith("Invalid input")


def test_save_and_load_through_menu(tmp_path):
    path = str(tmp_path / "roster.txt")
    controller, session, view = _controller([
        "1", "5", "Ann", "10",
        "3", "10", "Math", "1", "5",
        "4", path,
        "0",
    ])
    controller.run()
    assert not session.dirty
    assert load(path) == [
        Student(id=5, name="Ann", courses=[10]),
        Course(id=10, name="Math", teacher_id=1, students=[5]),
    ]
    assert view.messages[-1] == "Exiting."


def test_load_replaces_session(tmp_path):
    path = str(tmp_path / "roster.txt")
    save(path, [Teacher(id=1, name="Bob", experience=3)])
    session = RosterSession([Student(id=9, name="Old")])
    controller, session, _ = _controller([path], session=session)
    controller.load()
    assert session.records == [Teacher(id=1, name="Bob", experience=3)]


def test_empty_path_uses_default(tmp_path):
    path = str(tmp_path / "default.txt")
    session = RosterSession([Student(id=1, name="Ann")])
    controller, _, _ = _controller([""], session=session, default_path=path)
    controller.save()
    assert load(path) == [Student(id=1, name="Ann")]


def test_failed_load_keeps_session(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text("student id:1|name:Ann|courses:\nnospace\n", encoding="utf-8")
    session = RosterSession([Student(id=9, name="Old")])
    controller, session, view = _controller([str(path)], session=session)
    controller.load()
    assert session.records == [Student(id=9, name="Old")]
    assert view.messages[-1].startswith("ERROR while loading")


def test_load_missing_file_reports_error(tmp_path):
    controller, session, view = _controller([str(tmp_path / "missing.txt")])
    controller.load()
    assert len(session) == 0
    assert view.messages[-1].startswith("ERROR while loading")


def test_show_data_renders_overview():
    session = RosterSession([Course(id=1, name="Math", teacher_id=7, students=[])])
    controller, _, view = _controller(["6", "0"], session=session)
    controller.run()
    assert view.overviews[0].courses[0].teacher_name == "<unknown teacher id 7>"


def test_invalid_menu_choice():
    controller, _, view = _controller(["9", "0"])
    controller.run()
    assert "Invalid choice. Please try again." in view.messages


def test_exit_asks_to_save_unsaved_changes(tmp_path):
    path = str(tmp_path / "roster.txt")
    controller, session, _ = _controller(["1", "1", "Ann", "", "0", "y", path])
    controller.run()
    assert load(path) == [Student(id=1, name="Ann")]
    assert not session.dirty


def test_exit_without_saving(tmp_path):
    controller, session, view = _controller(["1", "1", "Ann", "", "0", "n"])
    controller.run()
    assert session.dirty
    assert view.messages[-1] == "Exiting."


def test_load_invalid_utf8_keeps_session(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"student id:1|name:J\xfcrgen|courses:\n")
    session = RosterSession([Student(id=9, name="Old")])
    session.add(Student(id=10, name="New"))
    controller, session, view = _controller([str(path)], session=session)
    controller.load()
    assert session.records == [Student(id=9, name="Old"), Student(id=10, name="New")]
    assert session.dirty
    assert view.messages[-1].startswith("ERROR while loading")


def test_add_student_rejects_underscore_id():
    controller, session, view = _controller(["1_0", "Ann", ""])
    controller.add_student()
    assert len(session) == 0
    assert view.messages[-1].startswith("Invalid input")
