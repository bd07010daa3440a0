from flask_wtf import FlaskForm
from wtforms import StringField, SelectField, SubmitField


class TodoForm(FlaskForm):
    # No validators: a blank title or a missing user is ignored by the
    # controller, not reported back.
    todo = StringField('Task', render_kw={"placeholder": "What needs to be done?"})
    user = SelectField('User', coerce=int, default=0, validate_choice=False)
    submit = SubmitField('Add Todo')

    def set_user_choices(self, user_options):
        self.user.choices = [(option.value, option.label) for option in user_options]
