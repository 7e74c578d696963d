import logging
from typing import Optional

from ogreader.core.config import settings
from ogreader.core.models import OpenGraph
from ogreader.core.taxonomy import DEFAULT_TYPE
from .classifier import TypeClassifier
from .harvester import PropertyHarvester
from .html_parser import HTMLParser
from .miner import HeuristicMiner
from .url_validator import URLValidator, URLValidatorInterface
from .validator import SpecificationValidator
from .web_fetcher import WebFetcher, WebFetcherInterface


logger = logging.getLogger(__name__)


class OpenGraphReader:
    """
    Builds ``OpenGraph`` objects from web pages.

    The pipeline is harvest, validate, default the type, classify, then mine;
    the entity is only created once every stage has succeeded. Instances hold
    no per-call state and can be shared between threads.
    """

    def __init__(
        self,
        ignore_specification_errors: Optional[bool] = None,
        mine_extra_information: Optional[bool] = None,
        web_fetcher: Optional[WebFetcherInterface] = None,
        mine_images: Optional[bool] = None,
        url_validator: Optional[URLValidatorInterface] = None
    ):
        if ignore_specification_errors is None:
            ignore_specification_errors = settings.ignore_specification_errors
        if mine_extra_information is None:
            mine_extra_information = settings.mine_extra_information
        if mine_images is None:
            mine_images = settings.mine_images

        self.ignore_specification_errors = ignore_specification_errors
        self.mine_extra_information = mine_extra_information
        self.url_validator: URLValidatorInterface = url_validator or URLValidator()
        self.web_fetcher: WebFetcherInterface = web_fetcher or WebFetcher(self.url_validator)

        self.harvester = PropertyHarvester()
        self.validator = SpecificationValidator()
        self.classifier = TypeClassifier()
        self.miner = HeuristicMiner(mine_images=mine_images)

    def read(self, url: str) -> OpenGraph:
        """
        Fetch ``url`` and read its Open Graph data.

        Raises:
            URLValidationError: malformed or unsafe URL, before any request is made
            FetchError: the document could not be retrieved
            SpecificationViolationError: required properties are missing and
                specification errors are not ignored
        """
        logger.info(f"Reading Open Graph data from URL: {url}")
        # WebFetcher validates again; checking here keeps a bad URL away from any fetcher
        self.url_validator.ensure_valid(url)
        html = self.web_fetcher.fetch_html(url)
        return self.read_html(html, url)

    def read_html(self, html: str, url: Optional[str] = None) -> OpenGraph:
        """Read Open Graph data from an HTML document that is already in hand"""
        parser = HTMLParser(html, url)

        properties = self.harvester.harvest(parser, self.mine_extra_information)
        self.validator.validate(properties, self.ignore_specification_errors)

        # Validated as declared, so a missing og:type is still reported
        properties.setdefault("type", DEFAULT_TYPE)

        base_type = self.classifier.classify(properties.get("type"))

        if self.mine_extra_information:
            mined = self.miner.mine(parser, properties)
            if mined:
                logger.debug(f"Mined properties: {sorted(mined)}")
            properties.update(mined)

        logger.info(f"Read {len(properties)} Open Graph properties from {url or 'document'}")
        return OpenGraph(
            properties=properties,
            source_url=url,
            base_type=base_type,
            from_source=True
        )


def read(
    url: str,
    ignore_specification_errors: bool = True,
    mine_extra_information: bool = True
) -> OpenGraph:
    """Read the Open Graph data of ``url`` with a one-off reader"""
    reader = OpenGraphReader(
        ignore_specification_errors=ignore_specification_errors,
        mine_extra_information=mine_extra_information
    )
    return reader.read(url)
