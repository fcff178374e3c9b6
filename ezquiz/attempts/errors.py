class QuizAttemptError(Exception):
    pass


class EmptyQuizAttemptError(QuizAttemptError):
    pass


class InvalidAnswerOptionError(QuizAttemptError):
    pass


class AttemptStateError(QuizAttemptError):
    pass
