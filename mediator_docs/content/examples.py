"""Embedded code examples, one per feature.

EXAMPLE_MARKERS maps each feature to the literal token that identifies a
relevant fenced block when examples are mined from a markdown document
instead of taken from EXAMPLES.
"""

from types import MappingProxyType
from typing import Mapping

EXAMPLE_LANGUAGE = "csharp"

EXAMPLE_MARKERS: Mapping[str, str] = MappingProxyType({
    "request": "IRequestHandler",
    "command": "ICommandHandler",
    "event": "IEventHandler",
    "stream": "IStreamRequestHandler",
    "caching": "[Cache(",
    "validation": "[Validate]",
    "http": "IHttpRequest",
    "middleware": "IRequestMiddleware",
})

EXAMPLES: Mapping[str, str] = MappingProxyType({
    "request": """// Request Contract
public record GetUserRequest(int UserId) : IRequest<User>;
public record User(int Id, string Name, string Email);

// Handler
[MediatorSingleton]
public partial class GetUserHandler : IRequestHandler<GetUserRequest, User>
{
    private readonly IUserRepository _repo;

    public GetUserHandler(IUserRepository repo) => _repo = repo;

    public async Task<User> Handle(GetUserRequest request, IMediatorContext context, CancellationToken ct)
    {
        return await _repo.GetByIdAsync(request.UserId, ct);
    }
}

// Usage
var user = await mediator.Request(new GetUserRequest(123));""",
    "command": """// Command Contract
public record SendEmailCommand(string To, string Subject, string Body) : ICommand;

// Handler
[MediatorSingleton]
public partial class SendEmailHandler : ICommandHandler<SendEmailCommand>
{
    private readonly IEmailService _email;

    public SendEmailHandler(IEmailService email) => _email = email;

    public async Task Handle(SendEmailCommand command, IMediatorContext context, CancellationToken ct)
    {
        await _email.SendAsync(command.To, command.Subject, command.Body, ct);
    }
}

// Usage
await mediator.Send(new SendEmailCommand("user@example.com", "Hello", "Welcome!"));""",
    "event": """// Event Contract
public record OrderPlacedEvent(int OrderId, decimal Total) : IEvent;

// Handlers (multiple can exist)
[MediatorSingleton]
public partial class InventoryHandler : IEventHandler<OrderPlacedEvent>
{
    public async Task Handle(OrderPlacedEvent @event, IMediatorContext context, CancellationToken ct)
    {
        // Update inventory
    }
}

[MediatorSingleton]
public partial class NotificationHandler : IEventHandler<OrderPlacedEvent>
{
    public async Task Handle(OrderPlacedEvent @event, IMediatorContext context, CancellationToken ct)
    {
        // Send notification
    }
}

// Usage
await mediator.Publish(new OrderPlacedEvent(123, 99.99m));""",
    "stream": """// Stream Request
public record SearchResultsRequest(string Query) : IStreamRequest<SearchResult>;
public record SearchResult(int Id, string Title);

// Handler
[MediatorSingleton]
public partial class SearchHandler : IStreamRequestHandler<SearchResultsRequest, SearchResult>
{
    public async IAsyncEnumerable<SearchResult> Handle(
        SearchResultsRequest request,
        IMediatorContext context,
        [EnumeratorCancellation] CancellationToken ct)
    {
        var results = await SearchDatabaseAsync(request.Query);
        foreach (var result in results)
        {
            if (ct.IsCancellationRequested) yield break;
            yield return result;
        }
    }
}

// Usage
var stream = await mediator.Request(new SearchResultsRequest("query"));
await foreach (var result in stream.Result)
{
    Console.WriteLine(result.Title);
}""",
    "caching": """// Cached Request Handler
[MediatorSingleton]
[Cache(AbsoluteExpirationSeconds = 300)]
public partial class GetProductHandler : IRequestHandler<GetProductRequest, Product>
{
    public async Task<Product> Handle(GetProductRequest request, IMediatorContext context, CancellationToken ct)
    {
        // This result will be cached for 5 minutes
        return await _db.Products.FindAsync(request.Id);
    }
}

// With Contract Key for parameterized caching
[ContractKey("{Id}")]
public partial record GetProductRequest(int Id) : IRequest<Product>;

// Force refresh
await mediator.Request(new GetProductRequest(1), ctx => ctx.ForceCacheRefresh());""",
    "validation": """// With Data Annotations
[Validate]
public record CreateUserRequest(
    [Required] [MinLength(2)] string Name,
    [Required] [EmailAddress] string Email,
    [Range(18, 150)] int Age
) : IRequest<User>;

// With FluentValidation
[Validate]
public record CreateOrderRequest(int ProductId, int Quantity) : IRequest<Order>;

public class CreateOrderValidator : AbstractValidator<CreateOrderRequest>
{
    public CreateOrderValidator()
    {
        RuleFor(x => x.ProductId).GreaterThan(0);
        RuleFor(x => x.Quantity).InclusiveBetween(1, 100);
    }
}

// Handle validation errors
try
{
    var user = await mediator.Request(new CreateUserRequest("", "invalid", 5));
}
catch (ValidateException ex)
{
    foreach (var error in ex.Errors)
        Console.WriteLine($"{error.Key}: {error.Value}");
}""",
    "http": """// HTTP GET Request
[Http(HttpVerb.Get, "users/{id}")]
public record GetUserRequest(
    [HttpParameter(HttpParameterType.Path)] int Id
) : IHttpRequest<User>;

// HTTP POST with Body
[Http(HttpVerb.Post, "users")]
public record CreateUserRequest(
    [HttpBody] CreateUserDto Body
) : IHttpRequest<User>;

// HTTP GET with Query Parameters
[Http(HttpVerb.Get, "users")]
public record SearchUsersRequest(
    [HttpParameter(HttpParameterType.Query)] string Search,
    [HttpParameter(HttpParameterType.Query)] int Page = 1
) : IHttpRequest<PagedResult<User>>;

// Configuration (appsettings.json)
{
  "Mediator": {
    "Http": {
      "MyApp.Contracts.*": "https://api.myapp.com"
    }
  }
}""",
    "middleware": """// Custom Request Middleware
[MediatorSingleton]
public partial class LoggingMiddleware<TRequest, TResult> : IRequestMiddleware<TRequest, TResult>
    where TRequest : IRequest<TResult>
{
    private readonly ILogger _logger;

    public LoggingMiddleware(ILogger<LoggingMiddleware<TRequest, TResult>> logger) => _logger = logger;

    public async Task<TResult> Process(
        TRequest request,
        IMediatorContext context,
        RequestHandlerDelegate<TResult> next,
        CancellationToken ct)
    {
        _logger.LogInformation("Handling {Request}", typeof(TRequest).Name);
        var sw = Stopwatch.StartNew();

        try
        {
            return await next();
        }
        finally
        {
            _logger.LogInformation("Handled {Request} in {Ms}ms", typeof(TRequest).Name, sw.ElapsedMilliseconds);
        }
    }
}

// Registration
services.AddSingleton(typeof(IRequestMiddleware<,>), typeof(LoggingMiddleware<,>));""",
})
