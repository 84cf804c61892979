"""Factories for tasks and the entities hanging off a task.

Covers comments, attachments, identity links and form data.
"""

from enginemocks import catalog
from enginemocks.builders import MockTaskBuilder
from enginemocks.core.models import (
    Attachment,
    Comment,
    FormField,
    FormProperty,
    FormType,
    IdentityLink,
    IdentityLinkType,
    ProcessDefinition,
    StartFormData,
    Task,
    TaskFormData,
)
from enginemocks.core.values import TypedValue
from enginemocks.dates import parse_date


def mock_task() -> MockTaskBuilder:
    """Return a task builder preloaded with the example task."""
    return MockTaskBuilder()


def create_mock_task() -> Task:
    return mock_task().build()


def create_mock_tasks() -> list[Task]:
    return [create_mock_task()]


# ============================================================================
# Comments and attachments
# ============================================================================


def create_mock_task_comment() -> Comment:
    return Comment(
        id=catalog.EXAMPLE_TASK_COMMENT_ID,
        task_id=catalog.EXAMPLE_TASK_ID,
        user_id=catalog.EXAMPLE_USER_ID,
        time=parse_date(catalog.EXAMPLE_TASK_COMMENT_TIME),
        full_message=catalog.EXAMPLE_TASK_COMMENT_FULL_MESSAGE,
    )


def create_mock_task_comments() -> list[Comment]:
    return [create_mock_task_comment()]


def create_mock_task_attachment() -> Attachment:
    return Attachment(
        id=catalog.EXAMPLE_TASK_ATTACHMENT_ID,
        name=catalog.EXAMPLE_TASK_ATTACHMENT_NAME,
        description=catalog.EXAMPLE_TASK_ATTACHMENT_DESCRIPTION,
        type=catalog.EXAMPLE_TASK_ATTACHMENT_TYPE,
        url=catalog.EXAMPLE_TASK_ATTACHMENT_URL,
        task_id=catalog.EXAMPLE_TASK_ID,
        process_instance_id=catalog.EXAMPLE_PROCESS_INSTANCE_ID,
    )


def create_mock_task_attachments() -> list[Attachment]:
    return [create_mock_task_attachment()]


# ============================================================================
# Identity links
# ============================================================================


def create_mock_user_assignee_identity_link() -> IdentityLink:
    return IdentityLink(
        task_id=catalog.EXAMPLE_TASK_ID,
        type=IdentityLinkType.ASSIGNEE,
        user_id=catalog.EXAMPLE_USER_ID,
    )


def create_mock_candidate_group_identity_link() -> IdentityLink:
    return IdentityLink(
        task_id=catalog.EXAMPLE_TASK_ID,
        type=IdentityLinkType.CANDIDATE,
        group_id=catalog.EXAMPLE_GROUP_ID,
    )


def create_another_mock_candidate_group_identity_link() -> IdentityLink:
    return IdentityLink(
        task_id=catalog.EXAMPLE_TASK_ID,
        type=IdentityLinkType.CANDIDATE,
        group_id=catalog.EXAMPLE_GROUP_ID2,
    )


# ============================================================================
# Forms
# ============================================================================


def _form_type() -> FormType:
    return FormType(name=catalog.EXAMPLE_FORM_PROPERTY_TYPE_NAME)


def _form_property() -> FormProperty:
    return FormProperty(
        id=catalog.EXAMPLE_FORM_PROPERTY_ID,
        name=catalog.EXAMPLE_FORM_PROPERTY_NAME,
        type=_form_type(),
        value=catalog.EXAMPLE_FORM_PROPERTY_VALUE,
        readable=catalog.EXAMPLE_FORM_PROPERTY_READABLE,
        writable=catalog.EXAMPLE_FORM_PROPERTY_WRITABLE,
        required=catalog.EXAMPLE_FORM_PROPERTY_REQUIRED,
    )


def _form_field() -> FormField:
    return FormField(
        id=catalog.EXAMPLE_FORM_PROPERTY_ID,
        label=catalog.EXAMPLE_FORM_PROPERTY_NAME,
        type=_form_type(),
        default_value=catalog.EXAMPLE_FORM_PROPERTY_VALUE,
    )


def create_mock_task_form_data() -> TaskFormData:
    """Form data with a form key and one form property."""
    return TaskFormData(
        form_key=catalog.EXAMPLE_FORM_KEY,
        deployment_id=catalog.EXAMPLE_DEPLOYMENT_ID,
        form_properties=(_form_property(),),
    )


def create_mock_task_form_data_using_form_fields_without_form_key() -> TaskFormData:
    """Generated form data: one form field and no form key."""
    return TaskFormData(
        form_key=None,
        deployment_id=catalog.EXAMPLE_DEPLOYMENT_ID,
        form_fields=(_form_field(),),
    )


def create_mock_start_form_data(definition: ProcessDefinition) -> StartFormData:
    return StartFormData(
        form_key=catalog.EXAMPLE_FORM_KEY,
        deployment_id=catalog.EXAMPLE_DEPLOYMENT_ID,
        form_properties=(_form_property(),),
        process_definition=definition,
    )


def create_mock_start_form_data_using_form_fields_without_form_key(
    definition: ProcessDefinition,
) -> StartFormData:
    return StartFormData(
        form_key=None,
        deployment_id=catalog.EXAMPLE_DEPLOYMENT_ID,
        form_fields=(_form_field(),),
        process_definition=definition,
    )


def create_mock_form_variables() -> dict[str, TypedValue]:
    """Variables submitted with a form, keyed by variable name."""
    return {catalog.EXAMPLE_VARIABLE_INSTANCE_NAME: catalog.EXAMPLE_PRIMITIVE_VARIABLE_VALUE}
