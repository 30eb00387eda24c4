"""Swift source templates for the five generated VIPER files.

Every renderer is a pure function of the module name and a
:class:`~viper_scaffold.core.models.HeaderInfo`; templates are plain
f-strings (Swift braces are doubled).  The module name is used verbatim
as a type-name prefix.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from viper_scaffold.core.layout import file_name
from viper_scaffold.core.models import HeaderInfo, OutputLayout, RenderedFile, Role
from viper_scaffold.utils.constants import FILE_EXTENSION

Renderer = Callable[[str, HeaderInfo], str]


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

def render_header(
    module: str,
    role: Role,
    header: HeaderInfo,
    extension: str = FILE_EXTENSION,
) -> str:
    """Render the comment block that opens every generated file."""
    return (
        "//\n"
        f"//  {file_name(module, role, extension)}\n"
        f"//  {header.project}\n"
        "//\n"
        f"//  Created by {header.author} on {header.date_stamp}.\n"
        f"//  Copyright © {header.year} {header.company}. All rights reserved.\n"
        "//"
    )


# ---------------------------------------------------------------------------
# File bodies
# ---------------------------------------------------------------------------

def render_contract(module: str, header: HeaderInfo) -> str:
    """Protocols binding the View, Presenter, Interactor and Router."""
    return f"""{render_header(module, Role.CONTRACT, header)}

import UIKit

protocol {module}View: class{{
    var presenter: {module}Presentation! {{ get set }}
}}

protocol {module}Presentation: class {{
    var view: {module}View? {{ get set }}
    var interactor: {module}UseCase! {{ get set }}
    var router: {module}Wireframe! {{ get set }}
}}

protocol {module}UseCase: class {{
    var output: {module}InteractorOutput? {{ get set }}
}}

protocol {module}InteractorOutput: class {{
}}

protocol {module}Wireframe: class {{
    var viewController: UIViewController? {{ get set }}

    static func assembleModule() -> UIViewController
}}
"""


def render_view(module: str, header: HeaderInfo) -> str:
    return f"""{render_header(module, Role.VIEW, header)}

import UIKit

class {module}ViewController: UIViewController, {module}View {{

    var presenter: {module}Presentation!

}}
"""


def render_interactor(module: str, header: HeaderInfo) -> str:
    return f"""{render_header(module, Role.INTERACTOR, header)}

import UIKit

class {module}Interactor: {module}UseCase {{

    weak var output: {module}InteractorOutput?

}}
"""


def render_presenter(module: str, header: HeaderInfo) -> str:
    return f"""{render_header(module, Role.PRESENTER, header)}

import Foundation

class {module}Presenter: {module}Presentation, {module}InteractorOutput {{

    weak var view: {module}View?
    var interactor: {module}UseCase!
    var router: {module}Wireframe!

}}
"""


def render_router(module: str, header: HeaderInfo) -> str:
    """Router with the ``assembleModule()`` wiring routine.

    Back-references (view, output, viewController) are ``weak`` in the
    generated code; the presenter owns interactor and router.
    """
    return f"""{render_header(module, Role.ROUTER, header)}

import UIKit

class {module}Router: {module}Wireframe {{

    weak var viewController: UIViewController?

    static func assembleModule() -> UIViewController {{
        let view = {module}ViewController()
        let presenter = {module}Presenter()
        let interactor = {module}Interactor()
        let router = {module}Router()

        view.presenter = presenter

        presenter.view = view
        presenter.interactor = interactor
        presenter.router = router

        interactor.output = presenter

        router.viewController = view

        return view
    }}

}}
"""


TEMPLATES: Mapping[Role, Renderer] = {
    Role.CONTRACT: render_contract,
    Role.VIEW: render_view,
    Role.INTERACTOR: render_interactor,
    Role.PRESENTER: render_presenter,
    Role.ROUTER: render_router,
}


def render_all(
    layout: OutputLayout,
    module: str,
    header: HeaderInfo,
) -> tuple[RenderedFile, ...]:
    """Render every file target of *layout*, preserving its order."""
    return tuple(
        RenderedFile(target=target, content=TEMPLATES[target.role](module, header))
        for target in layout.files
    )
