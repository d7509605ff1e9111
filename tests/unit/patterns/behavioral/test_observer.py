"""Tests for the Observer demonstration."""

from src.patterns.behavioral import observer
from src.patterns.behavioral.observer import Observer, Subject

EXPECTED = """\
Hi, I'm the Observer "1"
Hi, I'm the Observer "2"
Hi, I'm the Observer "3"
There are 3 observers in the list.
Observer "1" a new message is available --> Hello World! :D
Observer "2" a new message is available --> Hello World! :D
Observer "3" a new message is available --> Hello World! :D
Observer "3" removed from the list.
There are 2 observers in the list.
Observer "1" a new message is available --> The weather is hot today! :P
Observer "2" a new message is available --> The weather is hot today! :P
Hi, I'm the Observer "4"
Observer "2" removed from the list.
Hi, I'm the Observer "5"
There are 3 observers in the list.
Observer "1" a new message is available --> My new car is great! ;)
Observer "4" a new message is available --> My new car is great! ;)
Observer "5" a new message is available --> My new car is great! ;)
Observer "5" removed from the list.
Observer "4" removed from the list.
Observer "1" removed from the list.
Goodbye, I was the Observer "5"
Goodbye, I was the Observer "4"
Goodbye, I was the Observer "3"
Goodbye, I was the Observer "2"
Goodbye, I was the Observer "1"
"""


class TestObserver:
    """Test subscription management and notification."""

    def test_transcript(self, capsys):
        """Test the demonstration prints the documented narration."""
        assert observer.main() == 0
        assert capsys.readouterr().out == EXPECTED

    def test_runs_are_numbered_independently(self, capsys):
        """Test each run numbers its observers from one."""
        observer.main()
        capsys.readouterr()

        observer.main()

        assert capsys.readouterr().out == EXPECTED

    def test_observer_attaches_on_creation(self, capsys):
        """Test constructing an observer subscribes it to the subject."""
        subject = Subject()
        first = Observer(subject)
        second = Observer(subject)

        assert subject.observers == [first, second]
        assert (first.number, second.number) == (1, 2)

    def test_detach_unknown_observer_is_noop(self, capsys):
        """Test detaching twice leaves the list unchanged."""
        subject = Subject()
        watcher = Observer(subject)
        watcher.remove_me_from_the_list()

        subject.detach(watcher)

        assert subject.observers == []

    def test_default_message(self, capsys):
        """Test create_message without an argument sends Empty."""
        subject = Subject()
        Observer(subject)
        capsys.readouterr()

        subject.create_message()

        assert capsys.readouterr().out == (
            "There are 1 observers in the list.\n"
            'Observer "1" a new message is available --> Empty\n'
        )

    def test_business_logic_notifies_then_announces(self, capsys):
        """Test business logic changes the message before announcing work."""
        subject = Subject()
        Observer(subject)
        capsys.readouterr()

        subject.some_business_logic()

        assert capsys.readouterr().out == (
            "There are 1 observers in the list.\n"
            'Observer "1" a new message is available --> change message\n'
            "I'm about to do something important.\n"
        )

    def test_observer_may_detach_during_notify(self, capsys):
        """Test the remaining observers still get the message."""
        subject = Subject()

        class OneShot(Observer):
            def update(self, message_from_subject):
                super().update(message_from_subject)
                self.remove_me_from_the_list()

        one_shot = OneShot(subject)
        steady = Observer(subject)
        capsys.readouterr()

        subject.create_message("ping")

        out = capsys.readouterr().out
        assert 'Observer "2" a new message is available --> ping' in out
        assert subject.observers == [steady]
        assert one_shot not in subject.observers
