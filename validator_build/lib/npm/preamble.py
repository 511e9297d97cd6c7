"""Node.js preamble and environment wrapper for dart2js output.

dart2js emits browser-flavoured JavaScript that expects a ``self`` global.
The preamble recreates that environment on Node.js; the wrapper chooses
between the preamble and a plain browser alias at load time.
"""

from __future__ import annotations

# Node.js detector adopted from https://github.com/iliakan/detect-node
NODE_DETECTOR = (
    "Object.prototype.toString.call("
    "typeof process!=='undefined'?process:0)==='[object process]'"
)

BROWSER_ALIAS = "var self=global.self;self.exports=exports"

_PREAMBLE = """\
var dartNodePreambleSelf = typeof global !== "undefined" ? global : window;

var self = Object.create(dartNodePreambleSelf);

self.scheduleImmediate = typeof setImmediate !== "undefined"
    ? function (cb) {
        setImmediate(cb);
      }
    : function(cb) {
        setTimeout(cb, 0);
      };

if (typeof require !== "undefined") {
  self.require = require;
}

if (typeof exports !== "undefined") {
  self.exports = exports;
}

if (typeof process !== "undefined") {
  self.process = process;
}

if (typeof __dirname !== "undefined") {
  self.__dirname = __dirname;
}

if (typeof __filename !== "undefined") {
  self.__filename = __filename;
}

if (typeof Buffer !== "undefined") {
  self.Buffer = Buffer;
}

if (!dartNodePreambleSelf.window) {
  try {
    if (typeof WorkerGlobalScope !== "undefined" && dartNodePreambleSelf instanceof WorkerGlobalScope) {
      self.window = self;
    }
  } catch (e) {}

  var url = require("url");

  self.location = {
    get href() {
      if (url.pathToFileURL) {
        return url.pathToFileURL(process.cwd()).href + "/";
      } else {
        return "file://" + (function() {
          var cwd = process.cwd();
          if (process.platform != "win32") return cwd;
          return "/" + cwd.replace(/\\\\/g, "/");
        })() + "/";
      }
    }
  };

  (function() {
    function computeCurrentScript() {
      try {
        throw new Error();
      } catch(e) {
        var stack = e.stack;
        var re = new RegExp("^ *at [^(]*\\\\((.*):[0-9]*:[0-9]*\\\\)$", "mg");
        var lastMatch = null;
        do {
          var match = re.exec(stack);
          if (match != null) lastMatch = match;
        } while (match != null);
        return lastMatch[1];
      }
    }

    var cachedCurrentScript = null;
    self.document = {
      get currentScript() {
        if (cachedCurrentScript == null) {
          cachedCurrentScript = {src: computeCurrentScript()};
        }
        return cachedCurrentScript;
      }
    };
  })();

  self.dartDeferredLibraryLoader = function(uri, successCallback, errorCallback) {
    try {
      load(uri);
      successCallback();
    } catch (error) {
      errorCallback(error);
    }
  };
}
"""

_PREAMBLE_MINIFIED = (
    'var dartNodePreambleSelf="undefined"!=typeof global?global:window,'
    "self=Object.create(dartNodePreambleSelf);"
    'if(self.scheduleImmediate="undefined"!=typeof setImmediate?'
    "function(e){setImmediate(e)}:function(e){setTimeout(e,0)},"
    '"undefined"!=typeof require&&(self.require=require),'
    '"undefined"!=typeof exports&&(self.exports=exports),'
    '"undefined"!=typeof process&&(self.process=process),'
    '"undefined"!=typeof __dirname&&(self.__dirname=__dirname),'
    '"undefined"!=typeof __filename&&(self.__filename=__filename),'
    '"undefined"!=typeof Buffer&&(self.Buffer=Buffer),'
    "!dartNodePreambleSelf.window){"
    'try{"undefined"!=typeof WorkerGlobalScope&&'
    "dartNodePreambleSelf instanceof WorkerGlobalScope&&(self.window=self)}catch(e){}"
    'var url=require("url");'
    "self.location={get href(){return url.pathToFileURL?"
    'url.pathToFileURL(process.cwd()).href+"/":"file://"+function(){'
    'var e=process.cwd();return"win32"!=process.platform?e:"/"+e.replace(/\\\\/g,"/")}()+"/"}},'
    "function(){function e(){try{throw new Error}catch(n){"
    'var e=n.stack,r=new RegExp("^ *at [^(]*\\\\((.*):[0-9]*:[0-9]*\\\\)$","mg"),l=null;'
    "do{var t=r.exec(e);null!=t&&(l=t)}while(null!=t);return l[1]}}"
    "var n=null;self.document={get currentScript(){"
    "return null==n&&(n={src:e()}),n}}}(),"
    "self.dartDeferredLibraryLoader=function(e,n,r){try{load(e),n()}catch(e){r(e)}}}"
)


def get_preamble(*, minified: bool = False) -> str:
    """Return the Node.js preamble for dart2js output."""
    return _PREAMBLE_MINIFIED if minified else _PREAMBLE


def node_branch(preamble: str) -> str:
    """The wrapper branch taken when the detector finds Node.js."""
    return "{" + preamble + "}"


def browser_branch() -> str:
    """The wrapper branch taken in browsers."""
    return "{" + BROWSER_ALIAS + "}"


def environment_wrapper(*, minified: bool = True) -> str:
    """Both wrapper branches guarded by the Node.js detector.

    The wrapper is generated ahead of time, so both branches are always
    emitted; which one runs is decided by the detector at load time.
    """
    preamble = get_preamble(minified=minified)
    return f"if({NODE_DETECTOR}){node_branch(preamble)}else{browser_branch()}"


def wrap_compiled_js(compiled_js: str, *, minified: bool = True) -> str:
    """Prefix compiled JavaScript with the environment wrapper."""
    return f"{environment_wrapper(minified=minified)}\n{compiled_js}"
