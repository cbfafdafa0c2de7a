from mentalmath.questions import DifficultyParams, Operation, Question


def _params():
    return DifficultyParams(2, 1, 0.4, 0.3, 0.2, 0.1, 0.5, 1, 0.25)


def test_operation_weights_map_each_operation():
    weights = _params().operation_weights()
    assert list(weights) == list(Operation)
    assert weights[Operation.ADD] == 0.4
    assert weights[Operation.DIVIDE] == 0.1


def test_question_holds_fields():
    question = Question(12, 3, Operation.DIVIDE, 4.0, 0.5, 900.0)
    assert question.operation is Operation.DIVIDE
    assert question.correct_answer == 4.0